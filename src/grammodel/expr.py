"""Expression nodes forming the body of a production.

A production body is a tree of `Expr` nodes. Only `NonTerminal`
nodes refer to other productions; during resolution they look the
referenced production up and report it to the dependency collector
when it is not defined.

>>> body = Seq([NonTerminal('expr'), Literal('+'), Opt(NonTerminal('term'))])
>>> print(format_expr(body))
expr "+" [ term ]
>>> print(format_expr(Choice([Literal('a'), Seq([NonTerminal('b'), NonTerminal('c')])])))
"a" | b c

Every node accepts a visitor; the visitor is called with the method
named after the node class.

>>> class Names:
...     def visit_non_terminal(self, node):
...         return node.name
>>> NonTerminal('expr').accept(Names())
'expr'
"""

import re
from typing import List, Optional
from .ast import Node

def _visit_name(cls):
    return 'visit_' + re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()

class Expr(Node):
    def resolve(self, lookup, dependencies, origin):
        """Resolves the non-terminal references found under this node.

        The `lookup` is called with each referenced name and returns
        the production or None. Missing names are recorded in
        `dependencies` on behalf of the `origin` production.
        """
        for child in self.children():
            child.resolve(lookup, dependencies, origin)

    def children(self):
        return ()

    def accept(self, visitor):
        return getattr(visitor, _visit_name(type(self)))(self)

    def __str__(self):
        return format_expr(self)

class Choice(Expr):
    exprs: List[Expr]

    def children(self):
        return self.exprs

class Seq(Expr):
    exprs: List[Expr]

    def children(self):
        return self.exprs

class Opt(Expr):
    expr: Expr

    def children(self):
        return (self.expr,)

class Repeat(Expr):
    """Repetition of an expression, `max` of None meaning unbounded.

    >>> print(Repeat(NonTerminal('item')))
    { item }
    >>> print(Repeat(NonTerminal('item'), 1, 3))
    ( item ){1,3}
    """

    expr: Expr
    min: int = 0
    max: Optional[int] = None

    def children(self):
        return (self.expr,)

class NonTerminal(Expr):
    """A reference to another production by name.

    After resolution, the `production` attribute holds the referenced
    production, or None if it is not defined.

    >>> class Deps:
    ...     def missing_production(self, name, origin):
    ...         print('missing %s in %s' % (name, origin))
    >>> ref = NonTerminal('atom')
    >>> ref.resolve({}.get, Deps(), 'expr')
    missing atom in expr
    >>> print(ref.production)
    None
    """

    name: str
    production = None

    def resolve(self, lookup, dependencies, origin):
        self.production = lookup(self.name)
        if self.production is None:
            dependencies.missing_production(self.name, origin)

class Literal(Expr):
    value: str
    case_sensitive: Optional[bool] = None

class CharacterSet(Expr):
    name: str

class Epsilon(Expr):
    pass

class _Formatter:
    def format(self, expr, parent=None):
        text = expr.accept(self)
        if isinstance(expr, Choice) and isinstance(parent, Seq):
            return '( %s )' % text
        return text

    def visit_choice(self, node):
        return ' | '.join(self.format(e, node) for e in node.exprs)

    def visit_seq(self, node):
        return ' '.join(self.format(e, node) for e in node.exprs)

    def visit_opt(self, node):
        return '[ %s ]' % self.format(node.expr, node)

    def visit_repeat(self, node):
        if node.min == 0 and node.max is None:
            return '{ %s }' % node.expr.accept(self)
        return '( %s ){%d,%s}' % (node.expr.accept(self), node.min, '' if node.max is None else node.max)

    def visit_non_terminal(self, node):
        return node.name

    def visit_literal(self, node):
        if '"' in node.value and "'" not in node.value:
            return "'%s'" % node.value
        return '"%s"' % node.value.replace('\\', '\\\\').replace('"', '\\"')

    def visit_character_set(self, node):
        return '<%s>' % node.name

    def visit_epsilon(self, node):
        return ''

def format_expr(expr):
    """Formats the expression in an EBNF-like notation."""
    return _Formatter().format(expr)
