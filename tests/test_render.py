"""Tests for text rendering of logic trees."""

from logictree.graph import NodeType
from logictree.render import EMPTY_TREE, format_node_label, render_tree


class TestRenderTree:
    def test_empty_tree(self, empty_tree):
        assert render_tree(empty_tree) == EMPTY_TREE == "Empty tree"

    def test_connectors_and_indentation(self, conversion_tree):
        expected = "\n".join(
            [
                "└── ❗ [PROBLEM] Low conversion rate",
                "    ├── ⚠️ [CAUSE] Slow page load",
                "    │   └── ✅ [SOLUTION] Reduce load time to 2s within 2 weeks",
                "    └── ⚠️ [CAUSE] Weak call to action",
                "        └── ✅ [SOLUTION] Optimize the homepage",
            ]
        )
        assert render_tree(conversion_tree) == expected

    def test_collapsed_node_shows_child_count(self, conversion_tree):
        conversion_tree.toggle_expansion("node_1")

        assert render_tree(conversion_tree).splitlines() == [
            "└── ❗ [PROBLEM] Low conversion rate",
            "    ... (2 collapsed children)",
        ]

    def test_collapsed_leaf_renders_normally(self, conversion_tree):
        conversion_tree.toggle_expansion("node_3")
        assert "collapsed" not in render_tree(conversion_tree)

    def test_unreachable_nodes_not_rendered(self, conversion_tree):
        conversion_tree.add_node("Stray", NodeType.CAUSE, parent_id="node_77")
        assert "Stray" not in render_tree(conversion_tree)

    def test_color_wraps_labels(self, conversion_tree):
        output = render_tree(conversion_tree, use_color=True)

        first = output.splitlines()[0]
        assert first.startswith("└── \033[31m")
        assert first.endswith("\033[0m")

    def test_no_ansi_by_default(self, conversion_tree):
        assert "\033[" not in render_tree(conversion_tree)


class TestFormatNodeLabel:
    def test_each_type_symbol(self, empty_tree):
        expected = {
            NodeType.PROBLEM: "❗",
            NodeType.CAUSE: "⚠️",
            NodeType.EFFECT: "📊",
            NodeType.SOLUTION: "✅",
            NodeType.DECISION: "🤔",
            NodeType.OPTION: "🔗",
        }
        for node_type, symbol in expected.items():
            node = empty_tree.add_node("x", node_type)
            assert format_node_label(node) == f"{symbol} [{node_type.value.upper()}] x"
