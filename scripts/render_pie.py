import sys, json
from pieviz.ve.chart import piechart
from pieviz.ve.layout import Container, render_png
from pieviz.ve.surface import POINTER_LEAVE, POINTER_MOVE, PointerEvent

# Usage: python scripts/render_pie.py out.png
OUT = sys.argv[1] if len(sys.argv) > 1 else "pie.png"


def main():
    box = Container(left=40, top=10)
    chart = piechart(box, percentages=[25, 75, 100], colors="RAINBOW",
                     labels=["red", "orange", "yellow"], showLegend=True,
                     title="Budget", titleJustify="center", borderWidth=2)
    left, top = chart.surface.offset()

    # sweep the pointer across the chart, then leave it
    for dx in range(0, chart.options.height, 15):
        chart.surface.dispatch(POINTER_MOVE, PointerEvent(left + dx, top + chart.center))
        hit = chart.highlighted
        print(dx, hit.label if hit else "-")
    chart.surface.dispatch(POINTER_LEAVE)

    with open(OUT, "wb") as f:
        f.write(render_png(box))
    print(json.dumps({"png": OUT, "shares": chart.shares}))

if __name__ == "__main__":
    main()
