import math
import pytest


def test_running_total_is_differenced():
    from pieviz.svl.pie_verify import normalize_percentages
    assert normalize_percentages([75, 100]) == [75, 25]
    assert normalize_percentages([25, 75, 100]) == [25, 50, 25]


def test_running_total_must_not_decrease():
    from pieviz.svl.pie_verify import normalize_percentages
    from pieviz.svl.errors import InvalidPercentageError
    with pytest.raises(InvalidPercentageError):
        normalize_percentages([75, 50, 100])


def test_independent_shares_pass_through_in_order():
    from pieviz.svl.pie_verify import normalize_percentages
    for raw in ([75, 25], [10, 20, 30, 40], [40, 30, 20, 10], [33.3, 33.3, 33.4], [0, 60, 40]):
        shares = normalize_percentages(raw)
        assert shares == [float(x) for x in raw]
        assert math.isclose(math.fsum(shares), 100)


def test_input_is_not_mutated():
    from pieviz.svl.pie_verify import normalize_percentages
    raw = [25, 75, 100]
    normalize_percentages(raw)
    assert raw == [25, 75, 100]


def test_bad_sums_and_values_rejected():
    from pieviz.svl.pie_verify import normalize_percentages
    from pieviz.svl.errors import InvalidPercentageError
    for raw in ([50, 40], [60, 60], [-10, 110], [float("nan"), 100], []):
        with pytest.raises(InvalidPercentageError):
            normalize_percentages(raw)


def test_not_enough_colors():
    from pieviz.svl.pie_verify import normalize_percentages
    from pieviz.svl.errors import InsufficientColorsError, InvalidPercentageError
    with pytest.raises(InsufficientColorsError) as ei:
        normalize_percentages([20, 30, 50], ["red", "blue"])
    # callers catching the broader percentage error still see it
    assert isinstance(ei.value, InvalidPercentageError)


def test_spans_are_contiguous_and_cover_the_circle():
    from pieviz.svl.pie_verify import AngularSpan, to_spans
    assert to_spans([75, 25]) == [AngularSpan(0, 0.75), AngularSpan(0.75, 1.0)]

    spans = to_spans([33.3, 33.3, 33.4])
    assert spans[0].start == 0
    assert spans[-1].end == 1.0
    for a, b in zip(spans, spans[1:]):
        assert a.end == b.start


def test_zero_share_keeps_a_zero_length_span():
    from pieviz.svl.pie_verify import AngularSpan, to_spans
    spans = to_spans([50, 0, 50])
    assert len(spans) == 3
    assert spans[1] == AngularSpan(0.5, 0.5)
    assert spans[1].sweep == 0


def test_verify_pie_accepts_camel_case_keys():
    from pieviz.svl.pie_verify import verify_pie
    spec = verify_pie({"percentages": [75, 100], "colors": ["red", "blue"],
                       "showLegend": True, "titleJustify": "center", "borderWidth": 2})
    assert spec.percentages == [75, 25]
    assert spec.show_legend is True
    assert spec.title_justify == "center"
    assert spec.border_width == 2


def test_verify_pie_defaults_and_schemes():
    from pieviz.svl.pie_verify import verify_pie
    from pieviz.svl.schemes import COLOR_SCHEMES
    spec = verify_pie({})
    assert spec.percentages == [75, 25]
    assert spec.colors == COLOR_SCHEMES["EASTER"]
    assert spec.height == 300
    assert verify_pie({"colors": "rainbow"}).colors[0] == "red"


def test_verify_pie_schema_errors():
    from pydantic import ValidationError
    from pieviz.svl.pie_verify import verify_pie
    for raw in ({"height": 0}, {"titleJustify": "middle"}, {"borderWidth": -1},
                {"colors": "NO_SUCH_SCHEME"}):
        with pytest.raises(ValidationError):
            verify_pie(raw)


def test_spans_stay_inside_the_turn_when_the_sum_drifts():
    from pieviz.svl.pie_verify import AngularSpan, normalize_percentages, to_spans
    # 0.33 + 0.56 + 0.11 overshoots 1.0 in floating point
    spans = to_spans([33, 56, 11, 0])
    assert spans[-1] == AngularSpan(1.0, 1.0)
    assert to_spans(normalize_percentages([33, 89, 100, 100]))[-1] == AngularSpan(1.0, 1.0)

    for a in range(1, 98, 7):
        for b in range(1, 99 - a, 5):
            spans = to_spans(normalize_percentages([a, b, 100 - a - b, 0]))
            assert spans[0].start == 0
            assert spans[-1].end == 1.0
            assert spans[-1].sweep == 0
            for s in spans:
                assert 0 <= s.start <= s.end <= 1
            for x, y in zip(spans, spans[1:]):
                assert x.end == y.start
