import types

class ProductionNotFoundError(KeyError):
    """Raised when a grammar has no production of the requested name."""
    def __init__(self, name):
        KeyError.__init__(self, name)
        self.name = name

class Grammar:
    """Represents a resolved grammar.

    A grammar is built by `Root.resolve` and is not modified afterwards.
    It carries the language name, the default case sensitivity and
    the resolved productions, keyed by name.

    >>> from grammodel.production import Production
    >>> g = Grammar('cypher', False, {'cypher': Production('cypher', description='A query')})
    >>> g.language()
    'cypher'
    >>> g.case_sensitive_by_default()
    False
    >>> g.production_description('cypher')
    'A query'
    >>> g.production_description('statement')
    Traceback (most recent call last):
        ...
    grammodel.grammar.ProductionNotFoundError: 'statement'

    Grammars are equal if their languages, case sensitivity and productions
    are. The hash only takes the language into account.

    >>> g == Grammar('cypher', False, {'cypher': Production('cypher', description='A query')})
    True
    >>> h = Grammar('cypher', False, {})
    >>> g == h, hash(g) == hash(h)
    (False, True)
    """

    __slots__ = ('_language', '_case_sensitive', '_productions')

    def __init__(self, language, case_sensitive, productions):
        if not language:
            raise ValueError('the language of a grammar must not be empty')
        self._language = language
        self._case_sensitive = bool(case_sensitive)
        self._productions = productions

    def language(self):
        return self._language

    def case_sensitive_by_default(self):
        return self._case_sensitive

    def production_description(self, name):
        production = self._productions.get(name)
        if production is None:
            raise ProductionNotFoundError(name)
        return production.description

    def productions(self):
        """Returns a read-only view of the productions, keyed by name."""
        return types.MappingProxyType(self._productions)

    def accept(self, visitor):
        """Passes the visitor to every production, in the map's order.

        Exceptions raised by the visitor are propagated.
        """
        for production in self._productions.values():
            production.accept(visitor)

    def __iter__(self):
        return iter(self._productions.values())

    def __len__(self):
        return len(self._productions)

    def __contains__(self, name):
        return name in self._productions

    def __eq__(self, other):
        if not isinstance(other, Grammar):
            return NotImplemented
        return (self._case_sensitive == other._case_sensitive
            and self._language == other._language
            and self._productions == other._productions)

    def __ne__(self, other):
        r = self.__eq__(other)
        return r if r is NotImplemented else not r

    def __hash__(self):
        return hash(self._language)

    def __repr__(self):
        return 'Grammar(%r)' % self._language
