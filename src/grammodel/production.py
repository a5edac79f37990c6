from .expr import format_expr

class Production:
    """Represents a single named production of a grammar.

    A production has a name, an optional body made of `expr` nodes,
    an optional human-readable description and an optional vocabulary
    tag naming the grammar or vocabulary it was defined in.

    >>> from grammodel.expr import Seq, NonTerminal, Literal
    >>> p = Production('list', Seq([NonTerminal('list'), Literal(',')]))
    >>> print(p)
    list ::= list ","
    >>> print(Production('empty'))
    empty ::=

    The body resolves its non-terminal references through a lookup
    function; missing references are reported to the dependency collector
    on behalf of the production.

    >>> class Deps:
    ...     def missing_production(self, name, origin):
    ...         print('%s is missing in %s' % (name, origin.name))
    >>> p.resolve({}.get, Deps())
    list is missing in list
    >>> p.resolve({'list': p}.get, Deps())
    >>> p.body.exprs[0].production is p
    True

    Two productions are equal when all of their attributes are, the
    description and the vocabulary tag included.

    >>> Production('a', description='x') == Production('a', description='x')
    True
    >>> Production('a') == Production('a', vocabulary='cypher')
    False
    """

    def __init__(self, name, body=None, description=None, vocabulary=None):
        if not name:
            raise ValueError('a production must have a name')
        self.name = name
        self.body = body
        self.description = description
        self.vocabulary = vocabulary

    def resolve(self, lookup, dependencies):
        if self.body is not None:
            self.body.resolve(lookup, dependencies, self)

    def accept(self, visitor):
        return visitor.visit_production(self)

    def clone(self, vocabulary=None):
        """Returns a copy of the production with a fresh, unresolved body.

        The copy carries `vocabulary` as its tag if given, otherwise
        the production's own tag.
        """
        body = self.body.clone() if self.body is not None else None
        return Production(self.name, body, self.description, vocabulary if vocabulary is not None else self.vocabulary)

    def _key(self):
        return (self.name, self.body, self.description, self.vocabulary)

    def __eq__(self, other):
        if not isinstance(other, Production):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        r = self.__eq__(other)
        return r if r is NotImplemented else not r

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        if self.body is None:
            return '%s ::=' % self.name
        return ('%s ::= %s' % (self.name, format_expr(self.body))).rstrip()

    def __repr__(self):
        args = [repr(self.name)]
        if self.body is not None:
            args.append(repr(self.body))
        if self.description is not None:
            args.append('description=%r' % self.description)
        if self.vocabulary is not None:
            args.append('vocabulary=%r' % self.vocabulary)
        return 'Production(%s)' % ', '.join(args)
