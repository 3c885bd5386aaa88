"""Tests for the overlay marker registry."""

from star_overlay.overlay.markers import MarkerRegistry, PointMarker


def test_ids_start_at_one_and_increase():
    markers = MarkerRegistry()
    ids = [markers.add_point(None, 0, 0) for _ in range(3)]
    assert ids == [1, 2, 3]


def test_ids_not_reused_after_remove():
    markers = MarkerRegistry()
    markers.add_point("a", 0, 0)
    second = markers.add_point("b", 1, 1)
    markers.remove(second)
    assert markers.add_point("c", 2, 2) == 3


def test_ids_not_reused_after_clear():
    markers = MarkerRegistry()
    markers.add_point("a", 0, 0)
    markers.add_point("b", 1, 1)
    markers.clear()
    assert len(markers) == 0
    assert list(markers) == []
    assert markers.add_point("c", 2, 2) == 3


def test_remove_absent_id_is_noop():
    markers = MarkerRegistry()
    markers.add_point("a", 0, 0)
    before = list(markers)
    markers.remove(42)
    assert list(markers) == before


def test_marker_contents():
    markers = MarkerRegistry()
    text = "Rendezvous"
    marker_id = markers.add_point(text, 10.5, -3.0)
    marker = markers.get(marker_id)
    assert marker.text == "Rendezvous"
    assert marker.shape == PointMarker(10.5, -3.0)
    assert markers.get(99) is None


def test_insertion_order_kept():
    markers = MarkerRegistry()
    for i in range(4):
        markers.add_point(str(i), i, i)
    markers.remove(2)
    assert [m.text for m in markers] == ["0", "2", "3"]
