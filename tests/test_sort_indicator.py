from dashboard.services.multi_column_sort import make_spec
from dashboard.services.sort_comparators import SortDirection
from dashboard.services.sort_indicator import header_props, indicator_for


def test_inactive_column_has_no_indicator():
    assert indicator_for((), "name") is None
    props = header_props((make_spec("price"),), "name")
    assert not props.active
    assert props.sort_order is None and props.css_class == ""
    assert props.label("Name") == "Name"


def test_rank_and_primary():
    specs = (make_spec("b"), make_spec("a", "desc"))
    primary = indicator_for(specs, "b")
    secondary = indicator_for(specs, "a")
    assert (primary.rank, primary.is_primary) == (1, True)
    assert (secondary.rank, secondary.is_primary) == (2, False)
    assert secondary.direction is SortDirection.DESC


def test_header_props_multi_sort_badge():
    specs = (make_spec("b"), make_spec("a", "desc"))
    props = header_props(specs, "a")
    assert props.sort_order == "descend"
    assert props.css_class == "column-sorted"
    assert props.label("Price") == "Price ▼2"


def test_header_props_single_sort_has_no_badge():
    props = header_props((make_spec("name"),), "name")
    assert props.sort_order == "ascend"
    assert props.label("Name") == "Name ▲"
