import math

import numpy as np
import pytest

from app.core.errors import VectorFormatError
from app.nlp.vectors import format_vector, parse_vector, similarity


def test_format_vector_eight_decimals():
    assert format_vector([0.123456789, -1.0, 0.5]) == "[0.12345679,-1.0,0.5]"


def test_format_vector_replaces_nan():
    assert format_vector([math.nan, 1.0]) == "[0.0,1.0]"


def test_parse_vector_reads_literal_and_checks_dim():
    vec = parse_vector(" [0.5, -0.25,1] ", dim=3)
    np.testing.assert_array_equal(vec, [0.5, -0.25, 1.0])
    with pytest.raises(VectorFormatError):
        parse_vector("[1,2]", dim=3)


@pytest.mark.parametrize("bad", [None, "", "1,2,3", "[1,two,3]", "{1,2}"])
def test_parse_vector_rejects_malformed(bad):
    with pytest.raises(VectorFormatError):
        parse_vector(bad)


def test_similarity_is_clamped_cosine():
    a = np.array([1.0, 0.0])
    assert similarity(a, np.array([2.0, 0.0])) == pytest.approx(1.0)
    assert similarity(a, np.array([0.0, 3.0])) == pytest.approx(0.0)
    assert similarity(a, np.array([-1.0, 0.0])) == 0.0
    assert similarity(a, np.array([1.0, 1.0])) == pytest.approx(1 / math.sqrt(2))
    assert similarity(a, np.zeros(2)) == 0.0


def test_similarity_dimension_mismatch():
    with pytest.raises(VectorFormatError):
        similarity(np.ones(3), np.ones(4))
