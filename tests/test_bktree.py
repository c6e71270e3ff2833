from literal_typo_finder.bktree import BKTree, IndexedWord, build_index
from literal_typo_finder.distance import distance


WORDS = [
    "hello", "hella", "help", "shell", "yellow", "world", "word", "sword",
    "cat", "cats", "cot", "coat", "dog", "dot", "config", "confg", "settings",
    "setting", "receive", "recieve",
]


def _words(nodes) -> set[str]:
    return {node.word for node in nodes}


def test_empty_tree_has_no_root_and_no_results() -> None:
    tree = BKTree()

    assert tree.root is None
    assert len(tree) == 0
    assert tree.search("anything", 3) == []
    assert list(tree) == []


def test_first_word_becomes_root() -> None:
    tree = BKTree()
    assert tree.insert("Hello", "a.py:1:1") is True

    assert tree.root.word == "hello"
    assert tree.root.position == "a.py:1:1"
    assert tree.size == 1


def test_children_are_keyed_by_distance() -> None:
    tree = build_index((word, i) for i, word in enumerate(WORDS))

    assert tree.size == len(WORDS)
    for node in tree:
        for key, child in node.children.items():
            assert key != 0
            assert distance(node.word, child.word) == key


def test_duplicate_insertion_is_a_no_op() -> None:
    tree = BKTree()
    tree.insert("Hello", "first")
    tree.insert("world", "second")

    assert tree.insert("HELLO", "third") is False
    assert tree.size == 2
    assert tree.root.position == "first"


def test_search_excludes_the_query_itself() -> None:
    tree = build_index((word, None) for word in WORDS)

    for word in WORDS:
        for radius in range(4):
            assert word not in _words(tree.search(word, radius))


def test_search_respects_distance_bound() -> None:
    tree = build_index((word, None) for word in WORDS)

    for radius in range(4):
        for node in tree.search("helo", radius):
            assert 0 < distance(node.word, "helo") <= radius


def test_search_matches_brute_force() -> None:
    tree = build_index((word, None) for word in WORDS)

    for query in ["hello", "wrd", "kat", "confi", "recieve"]:
        for radius in range(4):
            expected = {w for w in WORDS if 0 < distance(w, query) <= radius}
            assert _words(tree.search(query, radius)) == expected


def test_radius_is_monotonic() -> None:
    tree = build_index((word, None) for word in WORDS)

    for query in ["hello", "cot", "settings"]:
        previous: set[str] = set()
        for radius in range(5):
            current = _words(tree.search(query, radius))
            assert previous <= current
            previous = current


def test_search_is_case_insensitive() -> None:
    upper = BKTree()
    upper.insert("Hello", None)
    upper.insert("Hella", None)
    lower = BKTree()
    lower.insert("hello", None)
    lower.insert("hella", None)

    assert _words(upper.search("HELLO", 1)) == _words(lower.search("hello", 1)) == {"hella"}
    assert upper.search("hello", 0) == []


def test_radius_zero_reports_nothing() -> None:
    tree = build_index((word, None) for word in WORDS)

    assert tree.search("hello", 0) == []


def test_contains_uses_normalized_form() -> None:
    tree = build_index((word, None) for word in ["Alpha", "beta"])

    assert "alpha" in tree
    assert "BETA" in tree
    assert "gamma" not in tree
    assert 42 not in tree


def test_chained_tree_does_not_hit_recursion_limit() -> None:
    # Distinct single characters are all at distance 1 from each other,
    # so every insertion descends the same edge and extends one chain
    words = [chr(0x4E00 + i) for i in range(1200)]
    tree = build_index((word, None) for word in words)

    depth = 0
    node = tree.root
    while node.children:
        node = node.children[1]
        depth += 1

    assert depth == len(words) - 1
    assert len(tree.search(words[0], 1)) == len(words) - 1


def test_indexed_word_normalizes_on_construction() -> None:
    node = IndexedWord("MiXeD", position=("f.go", 3, 7))

    assert node.word == "mixed"
    assert node.children == {}
