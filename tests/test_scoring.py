import pytest

from haulplan.services.planning.scoring import normalize01, parse_number, score_segment, score_segments


def test_parse_number_returns_fallback_for_unusable_values():
    assert parse_number("12.5") == 12.5
    assert parse_number(" 7 ") == 7.0
    assert parse_number(3) == 3.0
    assert parse_number("abc", 4) == 4
    assert parse_number("", 9) == 9
    assert parse_number(None, 1.5) == 1.5
    assert parse_number("nan", 2) == 2
    assert parse_number("inf", 2) == 2


def test_normalize01_treats_large_values_as_percentages():
    assert normalize01(0.5) == 0.5
    assert normalize01("50") == 0.5
    assert normalize01(150) == 1
    assert normalize01(-10) == 0
    assert normalize01(1) == 1
    assert normalize01("1") == 1


def test_normalize01_applies_fallback_before_clamping():
    assert normalize01("n/a", 0.5) == 0.5
    assert normalize01(None, 80) == 0.8


def test_score_segment_uses_defaults_for_missing_fields():
    segment = score_segment({"road_id": "R1"})

    assert segment.road_id == "R1"
    assert segment.road_type == ""
    assert segment.risk == pytest.approx(0.5)
    assert segment.effective_speed == pytest.approx(20.0)
    assert segment.capacity_tph == pytest.approx(131.25)
    assert segment.travel_minutes == pytest.approx(9.0)
    assert segment.cost == pytest.approx(12.5)


def test_score_segment_combines_record_fields():
    record = {
        "road_id": "HR-02",
        "road_type": "haul",
        "average_speed_kmh": "40",
        "length_km": "5",
        "traffic_density": "80",
        "maintenance_urgency": "0.9",
        "road_capacity": "200",
        "capacity_utilization": "0.4",
    }

    segment = score_segment(record)

    risk = 0.5 * 0.9 + 0.3 * 0.8 + 0.2 * 0.4
    effective_speed = 40 * (1 - 0.4 * risk)
    capacity_tph = 200 * (1 - 0.25 * risk)
    travel_minutes = (5 / effective_speed) * 60
    cost = travel_minutes * (1 + 0.5 * risk) + (1 - capacity_tph / 200) * 10

    assert segment.road_type == "haul"
    assert segment.density == pytest.approx(0.8)
    assert segment.risk == pytest.approx(risk)
    assert segment.effective_speed == pytest.approx(effective_speed)
    assert segment.capacity_tph == pytest.approx(capacity_tph)
    assert segment.travel_minutes == pytest.approx(travel_minutes)
    assert segment.cost == pytest.approx(cost)


def test_score_segment_floors_speed_and_length():
    segment = score_segment({"road_id": "R1", "average_speed_kmh": "2", "length_km": "0"})

    assert segment.effective_speed == 5
    assert segment.travel_minutes == pytest.approx(0.1 / 5 * 60)
    assert segment.cost > 0


def test_score_segment_never_reports_negative_throughput():
    segment = score_segment({"road_id": "R1", "road_capacity": "-100"})

    assert segment.capacity_tph == 0
    assert segment.cost > 0


def test_score_segment_identifier_falls_back_to_type():
    assert score_segment({"road_type": "ramp"}).road_id == "ramp"
    assert score_segment({}).road_id == "Road"


def test_score_segments_preserves_order():
    segments = score_segments([{"road_id": "A"}, {"road_id": "B"}])
    assert [segment.road_id for segment in segments] == ["A", "B"]
