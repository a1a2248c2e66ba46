import pytest

from fluentkit.tree_model import Node, TreeModel


def _data():
    return [
        {
            "title": "A",
            "key": "a",
            "children": [
                {"title": "A1", "key": "a1"},
                {"title": "A2", "key": "a2", "children": [{"title": "A2x", "key": "a2x"}]},
            ],
        },
        {"title": "B", "key": "b"},
    ]


@pytest.fixture
def model():
    m = TreeModel()
    m.set_data_source(_data())
    return m


def keys(model):
    return [node.key for node in model]


def by_key(model, key):
    return next(node for node in model.data_source if node.key == key)


def test_set_data_source_preorder(model):
    assert keys(model) == ["a", "a1", "a2", "a2x", "b"]
    assert [n.depth for n in model] == [0, 1, 1, 2, 0]
    assert model.data_source_size == 5
    assert model[0].title == "A"
    assert model[1].parent is model[0]
    assert model[0].parent is model.root


def test_getitem_out_of_range(model):
    assert model[4].key == "b"
    with pytest.raises(IndexError):
        model[5]
    with pytest.raises(IndexError):
        model[-1]
    assert len(model) == 5


def test_collapse_and_expand(model):
    model.collapse(0)
    assert keys(model) == ["a", "b"]
    assert model[0].is_expanded is False
    model.expand(0)
    assert keys(model) == ["a", "a1", "a2", "a2x", "b"]


def test_expand_skips_hidden_descendants(model):
    model.collapse(2)
    assert keys(model) == ["a", "a1", "a2", "b"]
    model.collapse(0)
    model.expand(0)
    assert keys(model) == ["a", "a1", "a2", "b"]
    assert by_key(model, "a2x").is_shown() is False


def test_collapse_twice_is_noop(model):
    model.collapse(0)
    model.collapse(0)
    assert keys(model) == ["a", "b"]


def test_check_branch_checks_leaves(model):
    model.check_row(0, True)
    assert [n.key for n in model.selection] == ["a1", "a2x"]
    assert model[0].is_checked() is True
    assert by_key(model, "a2").is_checked() is True
    model.check_row(1, False)
    assert model[0].is_checked() is False
    assert [n.key for n in model.selection] == ["a2x"]


def test_check_leaf(model):
    model.check_row(4, True)
    assert [n.key for n in model.selection] == ["b"]
    assert model[4].is_checked() is True


def test_remove_and_insert_rows(model):
    removed = [model[1], model[2]]
    model.remove_rows(1, 2)
    assert keys(model) == ["a", "a2x", "b"]
    model.insert_rows(1, removed)
    assert keys(model) == ["a", "a1", "a2", "a2x", "b"]


@pytest.mark.parametrize("row,count", [(-1, 1), (4, 2), (0, 0)])
def test_remove_rows_invalid_is_noop(model, row, count):
    model.remove_rows(row, count)
    assert len(model) == 5


def test_insert_rows_invalid_is_noop(model):
    model.insert_rows(6, [Node(key="x")])
    model.insert_rows(0, [])
    assert len(model) == 5


def test_has_next_node_by_index(model):
    a1 = by_key(model, "a1")
    a2x = by_key(model, "a2x")
    assert a1.has_next_node_by_index(0) is True
    assert a2x.has_next_node_by_index(0) is False
    assert a2x.has_next_node_by_index(1) is False


def test_hide_line_footer(model):
    assert by_key(model, "a1").hide_line_footer() is True
    assert by_key(model, "a2x").hide_line_footer() is True
    assert by_key(model, "b").hide_line_footer() is True
    assert by_key(model, "a").hide_line_footer() is False
    assert Node().hide_line_footer() is False


def test_hit_has_children_expanded(model):
    assert model.hit_has_children_expanded(0) is True
    assert model.hit_has_children_expanded(1) is False
    model.collapse(0)
    assert model.hit_has_children_expanded(0) is False


def test_all_collapse_and_expand(model):
    model.all_collapse()
    assert keys(model) == ["a", "b"]
    assert by_key(model, "a2").is_expanded is False
    model.all_expand()
    assert keys(model) == ["a", "a1", "a2", "a2x", "b"]
    assert all(n.is_expanded for n in model if n.has_children())


def test_drag_same_parent(model):
    model.all_collapse()
    model.drag_and_drop(1, 0, True)
    assert keys(model) == ["b", "a"]
    assert [n.key for n in model.root.children] == ["b", "a"]


def test_drag_to_other_parent(model):
    model.drag_and_drop(4, 1, True)
    assert keys(model) == ["a", "b", "a1", "a2", "a2x"]
    b = by_key(model, "b")
    assert b.parent is by_key(model, "a")
    assert b.depth == by_key(model, "a1").depth
    assert [n.key for n in by_key(model, "a").children] == ["b", "a1", "a2"]
    assert [n.key for n in model.root.children] == ["a"]


def test_drag_updates_descendant_depths(model):
    model.drag_and_drop(2, 4, False)
    a2 = by_key(model, "a2")
    assert a2.parent is model.root
    assert a2.depth == 0
    assert by_key(model, "a2x").depth == a2.depth + 1
    assert [n.key for n in model.root.children] == ["a", "b", "a2"]
    assert keys(model)[-1] == "a2"


@pytest.mark.parametrize("drag,drop,top", [(0, 0, True), (0, 0, False), (1, 2, True), (2, 1, False), (0, 5, True), (0, -1, True)])
def test_drag_noop(model, drag, drop, top):
    model.drag_and_drop(drag, drop, top)
    assert keys(model) == ["a", "a1", "a2", "a2x", "b"]
    assert [n.key for n in model.root.children] == ["a", "b"]


def test_set_rows(model):
    model.set_rows([model[4]])
    assert keys(model) == ["b"]
    assert len(model) == 1