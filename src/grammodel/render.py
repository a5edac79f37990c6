"""Renders a resolved grammar as EBNF-like text.

>>> from grammodel.root import Root
>>> from grammodel.production import Production
>>> from grammodel.expr import Seq, NonTerminal, Literal
>>> root = Root('sum')
>>> root.add(Production('sum', Seq([NonTerminal('num'), Literal('+'), NonTerminal('num')])))
>>> root.add(Production('num', Literal('1'), description='A number.'))
>>> print(render_grammar(root.resolve()))
(* grammar: sum *)
<BLANKLINE>
sum = num "+" num ;
<BLANKLINE>
(* A number. *)
num = "1" ;
<BLANKLINE>
"""

import sys
from jinja2 import Template
from .expr import format_expr

grammar_templ = Template(r"""
(* grammar: {{language}}{% if not case_sensitive %}, case-insensitive{% endif %} *)
{% for production in productions %}

{% if production.description %}
(* {{production.description}} *)
{% endif %}
{{production.name}} ={% if production.body %} {{production.body}}{% endif %} ;
{% endfor %}
""", trim_blocks=True, lstrip_blocks=True)

class _ProductionCollector:
    def __init__(self):
        self.productions = []

    def visit_production(self, production):
        self.productions.append({
            'name': production.name,
            'description': production.description and production.description.replace('*)', '* )'),
            'vocabulary': production.vocabulary,
            'body': format_expr(production.body) if production.body is not None else '',
            })

def render_grammar(grammar):
    collector = _ProductionCollector()
    grammar.accept(collector)
    return grammar_templ.render(
        language=grammar.language(),
        case_sensitive=grammar.case_sensitive_by_default(),
        productions=collector.productions).strip('\n') + '\n'

def print_grammar(grammar, file=sys.stdout):
    file.write(render_grammar(grammar))
