import pytest

from Mlearning import DataSeries, NotNumericalError, SeriesConfig


def test_unique_keeps_label_and_first_occurrence_order():
    s = DataSeries(["a", "b", "a", "c"], label="L")
    unq = s.unique()

    assert unq.label == "L"
    assert unq.to_list() == ["a", "b", "c"]
    assert s.to_list() == ["a", "b", "a", "c"]


def test_unique_distinguishes_types():
    unq = DataSeries([1, 1.0, True, 1, "1"]).unique()

    assert unq.to_list() == [1, 1.0, True, "1"]
    assert [type(v) for v in unq] == [int, float, bool, str]


def test_indices_where():
    s = DataSeries([0, 1, 0, 2])

    assert s.indices_where(lambda v: v == 0) == [0, 2]
    assert s.indices_where(lambda v: v > 5) == []


def test_auto_coding_follows_unique_order():
    s = DataSeries(["b", "a", "b", "c"])

    assert s.auto_coding() == {"b": 0, "a": 1, "c": 2}


def test_code_values_with_auto_coding():
    s = DataSeries(["red", "green", "red", "blue"], label="color")
    s.code_values(s.auto_coding())

    assert s.to_list() == [0, 1, 0, 2]
    assert s.label == "color"
    assert s.is_numerical()
    assert s.mean() == pytest.approx(0.75)


def test_code_values_missing_key_leaves_series_untouched():
    s = DataSeries(["yes", "no", "maybe"])

    with pytest.raises(KeyError):
        s.code_values({"yes": 1, "no": 0})

    assert s.to_list() == ["yes", "no", "maybe"]


def test_get_all_gathers_in_given_order():
    s = DataSeries(["x", "y", "z"], label="L")
    picked = s.get_all([2, 0, 2])

    assert picked.label == "L"
    assert picked.to_list() == ["z", "x", "z"]
    assert s.get_all([]).to_list() == []


@pytest.mark.parametrize("indices", [[3], [0, -1], [10, 0]])
def test_get_all_rejects_out_of_range_index(indices):
    with pytest.raises(IndexError):
        DataSeries(["x", "y", "z"]).get_all(indices)


def test_get_all_with_indices_where():
    s = DataSeries([10, -1, 20, -5], label="v")

    positives = s.get_all(s.indices_where(lambda v: v > 0))
    assert positives.to_list() == [10, 20]


def test_sorted_orders_by_numeric_value_and_keeps_types():
    s = DataSeries([3, 1.5, 2], label="L")
    out = s.sorted()

    assert out.to_list() == [1.5, 2, 3]
    assert [type(v) for v in out] == [float, int, int]
    assert out.label == ""
    assert s.to_list() == [3, 1.5, 2]


def test_sorted_requires_numeric_content():
    with pytest.raises(NotNumericalError):
        DataSeries([3, "a", 1]).sorted()


def test_derived_series_inherit_config():
    config = SeriesConfig(mode_tie_break="lowest")
    s = DataSeries([2, 2, 1, 1], config=config)

    assert s.unique().config is config
    assert s.get_all([0, 2]).config is config
    assert s.sorted().config is config


def test_unique_collapses_nan():
    nan = float("nan")
    unq = DataSeries([nan, 1.0, float("nan")]).unique()

    assert len(unq) == 2
    assert unq[1] == 1.0
    assert float("nan") in unq
