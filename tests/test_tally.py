from refcounter.models import Row
from refcounter.tally import compute_tally, tally_frame


def _select(rows, *indices):
    for row in rows:
        if row.index in indices:
            row.selected = True
    return rows


def test_compute_tally_counts_selected_rows_only(sample_rows):
    rows = _select(sample_rows, 0, 2)

    assert compute_tally(rows) == {"REF1": 2}


def test_compute_tally_omits_unselected_keys(sample_rows):
    tally = compute_tally(sample_rows)

    assert tally == {}
    assert "REF2" not in compute_tally(_select(sample_rows, 0))


def test_compute_tally_is_idempotent_and_pure(sample_rows):
    rows = _select(sample_rows, 0, 1, 2)
    before = [row.fields + (row.selected,) for row in rows]

    first = compute_tally(rows)
    second = compute_tally(rows)

    assert first == second
    assert list(first) == list(second)
    assert [row.fields + (row.selected,) for row in rows] == before


def test_compute_tally_sum_matches_selected_count():
    rows = [Row(index=i, key=f"K{i % 4}", selected=i % 3 == 0) for i in range(30)]

    tally = compute_tally(rows)

    assert sum(tally.values()) == sum(1 for row in rows if row.selected)


def test_compute_tally_keeps_first_occurrence_order():
    rows = [
        Row(index=0, key="B", selected=True),
        Row(index=1, key="A", selected=False),
        Row(index=2, key="A", selected=True),
        Row(index=3, key="B", selected=True),
    ]

    assert list(compute_tally(rows).items()) == [("B", 2), ("A", 1)]


def test_compute_tally_counts_empty_key():
    rows = [
        Row(index=0, key="", selected=True),
        Row(index=1, key="", selected=True),
        Row(index=2, key="REF", selected=True),
    ]

    assert compute_tally(rows) == {"": 2, "REF": 1}


def test_tally_frame_preserves_order():
    frame = tally_frame({"REF2": 1, "REF1": 3})

    assert list(frame.columns) == ["reference", "count"]
    assert frame["reference"].tolist() == ["REF2", "REF1"]
    assert frame["count"].tolist() == [1, 3]


def test_tally_frame_empty():
    frame = tally_frame({})

    assert frame.empty
    assert list(frame.columns) == ["reference", "count"]
