from algosolve.tree import TreeNode
from algosolve.tree_checks import is_balanced, max_depth


def test_balanced_empty_and_single():
    assert is_balanced(None) is True
    assert is_balanced(TreeNode(0)) is True


def test_balanced_grows_then_breaks():
    root = TreeNode(0)
    left = TreeNode(10)
    root.left = left
    assert is_balanced(root) is True
    left.right = TreeNode(20)
    assert is_balanced(root) is False


def test_balanced_full_example():
    root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
    assert is_balanced(root) is True


def test_unbalanced_deep_subtree():
    root = TreeNode(
        1,
        TreeNode(2),
        TreeNode(2, TreeNode(3, TreeNode(4), TreeNode(4)), TreeNode(3)),
    )
    assert is_balanced(root) is False


def test_max_depth_progression():
    assert max_depth(None) == 0
    root = TreeNode()
    assert max_depth(root) == 1
    child = TreeNode()
    root.left = child
    assert max_depth(root) == 2
    child.left = TreeNode()
    assert max_depth(root) == 3
    root.right = TreeNode()
    assert max_depth(root) == 3