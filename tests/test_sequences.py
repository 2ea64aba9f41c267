"""Tests for sequence problems."""

from practice_kit.core import Product, RatedItem
from practice_kit.problems import (
    concatenate_arrays,
    filter_by_rating,
    get_most_expensive_product,
)


def test_filter_by_rating_keeps_high_ratings():
    """Test items rated 4 or more are kept in order."""
    books = [
        RatedItem(title="Book A", rating=4.5),
        RatedItem(title="Book B", rating=3.2),
        RatedItem(title="Book C", rating=5.0),
        RatedItem(title="Book D", rating=4),
    ]

    result = filter_by_rating(books)

    assert [b.title for b in result] == ["Book A", "Book C", "Book D"]


def test_filter_by_rating_boundary():
    """Test threshold is inclusive."""
    assert filter_by_rating([RatedItem(title="Edge", rating=4)]) == [RatedItem(title="Edge", rating=4)]
    assert filter_by_rating([RatedItem(title="Below", rating=3.99)]) == []


def test_filter_by_rating_empty():
    """Test empty input."""
    assert filter_by_rating([]) == []


def test_filter_by_rating_does_not_mutate_input():
    """Test input list is left untouched."""
    books = [RatedItem(title="Low", rating=1), RatedItem(title="High", rating=5)]

    filter_by_rating(books)

    assert len(books) == 2


def test_filter_by_rating_custom_threshold():
    """Test explicit min rating."""
    books = [RatedItem(title="A", rating=2.5), RatedItem(title="B", rating=1)]

    assert [b.title for b in filter_by_rating(books, min_rating=2)] == ["A"]


def test_concatenate_arrays():
    """Test sequences are joined in argument order."""
    assert concatenate_arrays([1, 2], [3], [4, 5]) == [1, 2, 3, 4, 5]
    assert concatenate_arrays(["a"], ["b", "c"]) == ["a", "b", "c"]


def test_concatenate_arrays_no_arguments():
    """Test zero arguments gives an empty list."""
    assert concatenate_arrays() == []


def test_concatenate_arrays_one_level_only():
    """Test nested lists are kept as elements."""
    assert concatenate_arrays([[1, 2]], [3]) == [[1, 2], 3]


def test_most_expensive_product():
    """Test product with highest price is found."""
    products = [
        Product(name="Pen", price=10),
        Product(name="Bag", price=50),
        Product(name="Notebook", price=25),
    ]

    assert get_most_expensive_product(products) is products[1]


def test_most_expensive_product_empty():
    """Test empty input gives None."""
    assert get_most_expensive_product([]) is None


def test_most_expensive_product_tie_keeps_first():
    """Test the first of equally priced products wins."""
    first = Product(name="A", price=10)
    second = Product(name="B", price=10)

    assert get_most_expensive_product([first, second]) is first


def test_most_expensive_product_accepts_iterator():
    """Test generators are accepted."""
    products = (Product(name=str(p), price=p) for p in [3, 7, 5])

    assert get_most_expensive_product(products).name == "7"
