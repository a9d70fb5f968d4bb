# pieviz/ve/plotly_adapter.py
import json


def pie_figure_json(chart, title=None):
    """Plotly figure for a chart: same order, colors and border, first slice at 3 o'clock going clockwise."""
    opts = chart.options
    entries = chart.legend_index.entries
    # plotly merges slices that share a label
    labels = [e.label or f"slice {i + 1}" for i, e in enumerate(entries)]
    fig = {
        "data":[{
            "type":"pie",
            "labels":labels,
            "values":chart.shares,
            "name":"parts",
            "sort":False,
            "direction":"clockwise",
            "rotation":90,
            "marker":{
                "colors":[e.color_key for e in entries],
                "line":{"color":opts.border_color, "width":opts.border_width},
            },
        }],
        "layout":{
            "title":{"text": title if title is not None else opts.title},
            "showlegend":opts.show_legend,
            "width":opts.height,
            "height":opts.height,
        },
    }
    return json.dumps(fig)
