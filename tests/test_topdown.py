from heapview.allocationdata import AllocationData
from heapview.location import Symbol
from heapview.topdown import build_top_down, find_by_symbol, set_parents, to_top_down_data
from heapview.treemodel import RowData


def cost(n):
    return AllocationData(allocations=n, temporary=0, leaked=n, peak=n)


def row(name, n, children=()):
    return RowData(cost(n), Symbol(name, "bin", "/usr/bin"), None, list(children))


def chain_tree():
    tree = [row("alloc", 10, [row("caller", 10, [row("main", 10)])])]
    set_parents(tree, None)
    return tree


def test_set_parents_links_children():
    tree = chain_tree()
    top = tree[0]
    assert top.parent is None
    assert top.children[0].parent is top
    assert top.children[0].children[0].parent is top.children[0]


def test_find_by_symbol():
    rows = [row("a", 1), row("b", 2)]
    assert find_by_symbol(row("b", 5), rows) is rows[1]
    assert find_by_symbol(row("c", 5), rows) is None


def test_chain_is_reversed():
    top = to_top_down_data(chain_tree())
    assert [r.symbol.symbol for r in top] == ["main"]
    assert top[0].children[0].symbol.symbol == "caller"
    assert top[0].children[0].children[0].symbol.symbol == "alloc"
    assert top[0].children[0].children[0].cost == cost(10)


def test_parents_set_in_result():
    top = to_top_down_data(chain_tree())
    middle = top[0].children[0]
    assert top[0].parent is None
    assert middle.parent is top[0]
    assert middle.children[0].parent is middle


def test_branching_callers_merge_at_root():
    tree = [row("alloc", 10, [row("b", 6, [row("main", 6)]), row("c", 4, [row("main", 4)])])]
    set_parents(tree, None)
    top = to_top_down_data(tree)
    assert len(top) == 1
    main = top[0]
    assert main.cost == cost(10)
    assert {r.symbol.symbol: r.cost for r in main.children} == {"b": cost(6), "c": cost(4)}
    for child in main.children:
        assert child.children[0].symbol.symbol == "alloc"
        assert child.children[0].cost == child.cost


def test_partial_leaf_becomes_own_root():
    tree = [row("alloc", 10, [row("b", 6)])]
    set_parents(tree, None)
    top = to_top_down_data(tree)
    by_name = {r.symbol.symbol: r for r in top}
    assert set(by_name) == {"alloc", "b"}
    assert by_name["alloc"].cost == cost(4)
    assert by_name["b"].cost == cost(6)
    assert by_name["b"].children[0].cost == cost(6)


def test_build_top_down_returns_total_and_preserves_sum():
    tree = [row("x", 3, [row("main", 3)]), row("y", 7, [row("main", 7)])]
    set_parents(tree, None)
    out = []
    total = build_top_down(tree, out)
    assert total == cost(3) + cost(7)
    summed = AllocationData()
    for r in out:
        summed += r.cost
    assert summed == total


def test_empty_input():
    assert to_top_down_data([]) == []