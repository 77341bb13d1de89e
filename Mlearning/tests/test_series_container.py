import numpy as np
import pandas as pd
import pytest

from Mlearning import DataSeries, DataShape, DescriptiveStatistics


def test_empty_series_is_both_categorical_and_numerical():
    s = DataSeries()

    assert s.is_categorical()
    assert s.is_numerical()


def test_classification():
    assert DataSeries(["a", True]).is_categorical()
    assert not DataSeries(["a", True]).is_numerical()

    assert DataSeries([1, 2.5]).is_numerical()
    assert not DataSeries([1, 2.5]).is_categorical()

    mixed = DataSeries([1, "a"])
    assert not mixed.is_numerical()
    assert not mixed.is_categorical()

    assert not DataSeries([True]).is_numerical()


def test_equality_is_one_directional_containment():
    a = DataSeries([1, 2])
    b = DataSeries([1, 2, 3])

    assert a == b
    assert not b == a
    assert a != DataSeries([1.0, 2.0])
    assert a != [1, 2]


def test_series_is_unhashable():
    with pytest.raises(TypeError):
        hash(DataSeries([1]))


def test_label():
    s = DataSeries(label="price")
    assert s.label == "price"

    s.label = "cost"
    assert s.label == "cost"
    assert DataSeries().label == ""

    with pytest.raises(TypeError):
        s.label = 3


def test_mutation():
    s = DataSeries([1, 2])
    s.append(3.5)
    s.extend(["a", False])

    assert len(s) == 5
    assert s[2] == 3.5
    assert s.pop() is False
    assert s.to_list() == [1, 2, 3.5, "a"]

    s.clear()
    assert len(s) == 0


def test_remove_matches_type_tag():
    s = DataSeries([1, 1.0, 2])
    s.remove(1.0)

    assert s.to_list() == [1, 2]

    with pytest.raises(ValueError):
        s.remove("2")


def test_rejects_unsupported_values():
    with pytest.raises(TypeError):
        DataSeries([1, None])

    s = DataSeries()
    with pytest.raises(TypeError):
        s.append([1, 2])


def test_numpy_scalars_are_normalized():
    s = DataSeries([np.int64(3), np.float64(1.5), np.bool_(True)])

    assert [type(v) for v in s] == [int, float, bool]


def test_contains_is_type_aware():
    s = DataSeries([1, "a"])

    assert 1 in s
    assert "a" in s
    assert 1.0 not in s
    assert True not in s
    assert None not in s


def test_indexing_out_of_range():
    with pytest.raises(IndexError):
        DataSeries([1])[1]


def test_shape_and_protocol():
    s = DataSeries([1, 2, 3])

    assert s.shape == DataShape(rows=3, columns=1)
    assert isinstance(s, DescriptiveStatistics)


def test_from_literals():
    s = DataSeries.from_literals(["1", "2,5", "true", "x"], label="raw")

    assert s.label == "raw"
    assert s.to_list() == [1, 2.5, True, "x"]
    assert [type(v) for v in s] == [int, float, bool, str]


def test_from_pandas():
    s = DataSeries.from_pandas(pd.Series([10, 20, 15], name="sales"))

    assert s.label == "sales"
    assert s.to_list() == [10, 20, 15]
    assert s.is_numerical()
    assert s.median() == 15.0

    renamed = DataSeries.from_pandas(pd.Series(["a", "b"]), label="grade")
    assert renamed.label == "grade"
    assert renamed.is_categorical()


def test_to_pandas():
    numeric = DataSeries([1, 2, 3], label="n").to_pandas()
    assert numeric.name == "n"
    assert pd.api.types.is_integer_dtype(numeric)
    assert numeric.tolist() == [1, 2, 3]

    mixed = DataSeries([1, "a", True], label="m").to_pandas()
    assert mixed.dtype == object
    assert mixed.tolist() == [1, "a", True]

    assert DataSeries().to_pandas().dtype == object
