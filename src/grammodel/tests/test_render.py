import io
import unittest

from grammodel.expr import Choice, Seq, Opt, Repeat, NonTerminal, Literal, CharacterSet, Epsilon, format_expr
from grammodel.grammar import Grammar
from grammodel.production import Production
from grammodel.render import render_grammar, print_grammar

class TestFormat(unittest.TestCase):
    def test_nested_choice_is_parenthesized(self):
        expr = Seq([NonTerminal('a'), Choice([Literal('b'), NonTerminal('c')])])
        self.assertEqual(format_expr(expr), 'a ( "b" | c )')

    def test_repeat(self):
        self.assertEqual(format_expr(Repeat(Seq([NonTerminal('a'), NonTerminal('b')]))), '{ a b }')
        self.assertEqual(format_expr(Repeat(NonTerminal('a'), 1)), '( a ){1,}')

    def test_leaves(self):
        self.assertEqual(format_expr(Literal('say "hi"')), "'say \"hi\"'")
        self.assertEqual(format_expr(CharacterSet('ID_Start')), '<ID_Start>')
        self.assertEqual(format_expr(Opt(Epsilon())), '[  ]')

    def test_literal_with_both_quotes_is_escaped(self):
        self.assertEqual(format_expr(Literal('a"b\'c')), '"a\\"b\'c"')
        self.assertEqual(format_expr(Literal('\\"\'')), '"\\\\\\"\'"')

class TestRender(unittest.TestCase):
    def setUp(self):
        self.g = Grammar('cypher', False, {
            'cypher': Production('cypher', Seq([NonTerminal('clause'), Literal(';')]), description='Entry point.'),
            'clause': Production('clause'),
            })

    def test_render(self):
        lines = render_grammar(self.g).splitlines()
        self.assertEqual(lines[0], '(* grammar: cypher, case-insensitive *)')
        self.assertIn('(* Entry point. *)', lines)
        self.assertIn('cypher = clause ";" ;', lines)
        self.assertIn('clause = ;', lines)
        self.assertLess(lines.index('cypher = clause ";" ;'), lines.index('clause = ;'))

    def test_description_cannot_close_comment(self):
        g = Grammar('g', True, {'g': Production('g', description='ends (* early *) here')})
        lines = render_grammar(g).splitlines()
        self.assertIn('(* ends (* early * ) here *)', lines)

    def test_print(self):
        out = io.StringIO()
        print_grammar(self.g, file=out)
        self.assertEqual(out.getvalue(), render_grammar(self.g))
        self.assertTrue(out.getvalue().endswith('clause = ;\n'))

if __name__ == '__main__':
    unittest.main()
