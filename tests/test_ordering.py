from blog_funnel.db.models import WebResult
from blog_funnel.services.ordering import display_key, sort_web_results


def _result(title: str, order_index: int, sponsored: bool) -> WebResult:
    return WebResult(title=title, url=f"https://{title}.example", order_index=order_index, is_sponsored=sponsored)


def test_sponsored_results_come_first() -> None:
    results = [
        _result("organic-0", 0, False),
        _result("sponsored-2", 2, True),
        _result("organic-1", 1, False),
        _result("sponsored-0", 0, True),
    ]

    ordered = [r.title for r in sort_web_results(results)]

    assert ordered == ["sponsored-0", "sponsored-2", "organic-0", "organic-1"]


def test_ties_keep_incoming_order() -> None:
    first = _result("first", 1, False)
    second = _result("second", 1, False)

    assert sort_web_results([first, second]) == [first, second]
    assert sort_web_results([second, first]) == [second, first]


def test_missing_order_index_sorts_as_zero() -> None:
    result = WebResult(title="x", url="https://x.example", is_sponsored=None)
    result.order_index = None

    assert display_key(result) == (1, 0)
