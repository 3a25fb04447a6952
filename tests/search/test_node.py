from eightpuzzle.search.node import Node, reconstruct_path


def test_identity_is_state_only():
    a = Node(123456780, None, 5, 3)
    b = Node(123456780, Node(123456708), 1, 0)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Node(123456708)


def test_ordering_by_score():
    assert Node(123456780, score=1) < Node(123456708, score=2)
    assert not Node(123456780, score=2) < Node(123456708, score=2)


def test_path_walks_parents_to_root():
    root = Node(123456078)
    mid = Node(123456708, root, 0, 1)
    leaf = Node(123456780, mid, 0, 2)
    assert leaf.path() == [123456078, 123456708, 123456780]
    assert reconstruct_path(root) == [123456078]
    assert reconstruct_path(None) == []
