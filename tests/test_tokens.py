from minishell.tokens import AstNode, TokenType


def test_token_type_order_matches_declaration():
    assert [int(t) for t in TokenType] == list(range(7))
    assert TokenType(0) is TokenType.WORD
    assert TokenType(1) is TokenType.PIPE
    assert TokenType(6) is TokenType.ENV_VAR
    node = AstNode(TokenType(6), ["$HOME"])
    assert node.type == 6


def test_ast_node_defaults():
    node = AstNode()
    assert node.type is TokenType.WORD
    assert node.args == []
    assert node.left is None and node.right is None


def test_ast_node_args_are_independent():
    first = AstNode()
    second = AstNode()
    first.args.append("ls")
    assert second.args == []


def test_ast_node_links_children():
    left = AstNode(TokenType.WORD, ["ls"])
    right = AstNode(TokenType.WORD, ["wc"])
    pipe = AstNode(TokenType.PIPE, ["|"], left, right)
    assert pipe.left.args == ["ls"]
    assert pipe.right.args == ["wc"]