from charts import score_gauge, skill_gap_radar
from scanner import SCORE_HEX
from schema_analysis import AnalysisResult, SKILL_GAP_CATEGORIES
from stubs import analysis_payload


def _result(score=72):
    return AnalysisResult.model_validate_json(analysis_payload(score=score))


def test_gauge_value_and_colour():
    indicator = score_gauge(_result(72)).data[0]

    assert indicator.value == 72
    assert indicator.number.suffix == "%"
    assert indicator.gauge.bar.color == SCORE_HEX["yellow"]


def test_gauge_colour_follows_thresholds():
    assert score_gauge(_result(80)).data[0].gauge.bar.color == SCORE_HEX["green"]
    assert score_gauge(_result(59)).data[0].gauge.bar.color == SCORE_HEX["red"]


def test_radar_closes_polygon():
    trace = skill_gap_radar(_result()).data[0]

    assert list(trace.theta) == SKILL_GAP_CATEGORIES + SKILL_GAP_CATEGORIES[:1]
    assert list(trace.r) == [70, 85, 65, 90, 50, 70]
