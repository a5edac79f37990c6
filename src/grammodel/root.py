"""The production table of a grammar under construction.

A `Root` collects productions, either one by one or by merging
a vocabulary, and resolves them into an immutable `Grammar`.

>>> from grammodel.expr import Seq, NonTerminal, Literal
>>> root = Root('list')
>>> root.add(Production('list', Seq([NonTerminal('item'), Literal(';')])))
>>> root.add(Production('item', Literal('x')))
>>> g = root.resolve()
>>> g
Grammar('list')
>>> [p.name for p in g]
['list', 'item']

Production names are unique within a table.

>>> root = Root('list')
>>> root.add(Production('item'))
>>> root.add(Production('item', Literal('y')))
Traceback (most recent call last):
    ...
grammodel.root.DuplicateDefinitionError: Duplicate definition of 'item' production
"""

import enum
import sys
from .production import Production
from .dependencies import Dependencies
from .grammar import Grammar

class ResolutionOption(enum.Enum):
    ALLOW_ROOTLESS = 'allow-rootless'
    SKIP_UNUSED_PRODUCTIONS = 'skip-unused-productions'

class DuplicateDefinitionError(ValueError):
    """Raised when a production of the same name is already defined."""
    def __init__(self, name):
        ValueError.__init__(self, "Duplicate definition of '%s' production" % name)
        self.name = name

class Root:
    def __init__(self, language, case_sensitive=True, productions=()):
        if not language:
            raise ValueError('the language of a grammar must not be empty')
        self.language = language
        self.case_sensitive = case_sensitive
        self._productions = {}
        for production in productions:
            self.add(production)

    def add(self, production):
        if production.name in self._productions:
            raise DuplicateDefinitionError(production.name)
        self._productions[production.name] = production

    def add_vocabulary(self, vocabulary):
        """Adds all productions of the vocabulary to the table.

        The productions go through `add`, so a name clash between
        a local production and an imported one is an error too.
        """
        for production in vocabulary.resolve():
            self.add(production)

    def __iter__(self):
        return iter(self._productions.values())

    def __len__(self):
        return len(self._productions)

    def __contains__(self, name):
        return name in self._productions

    def resolve(self, *options, copy=dict, diagnostics=None):
        """Resolves all references between productions and builds the grammar.

        The production named after the language is the root. With
        `ALLOW_ROOTLESS`, a table without such a production is accepted
        and every production whose vocabulary is the language is a root
        instead.

        The references of every production are resolved, whether or
        not the production is reachable from the root. References to
        undefined productions are collected and reported together by
        raising `MissingProductionError`.

        Productions that are neither a root nor referenced are reported
        as unused to `diagnostics` (standard error by default), unless
        `SKIP_UNUSED_PRODUCTIONS` is given. They are kept in the grammar
        either way.

        The production map of the grammar is `copy(productions)`, where
        `productions` is the table's insertion-ordered dict.
        """
        options = frozenset(opt for opt in options if opt is not None)
        dependencies = Dependencies()
        unused = set(self._productions)

        if self.language in unused:
            unused.discard(self.language)
        elif ResolutionOption.ALLOW_ROOTLESS in options:
            for production in self._productions.values():
                if production.vocabulary == self.language:
                    unused.discard(production.name)
        else:
            dependencies.missing_root(self.language, Production(self.language, vocabulary=self.language))

        def lookup(name):
            unused.discard(name)
            return self._productions.get(name)

        for production in self._productions.values():
            production.resolve(lookup, dependencies)

        dependencies.report_missing_productions()

        if unused and ResolutionOption.SKIP_UNUSED_PRODUCTIONS not in options:
            if diagnostics is None:
                diagnostics = sys.stderr
            print('WARNING! Unused productions:', file=diagnostics)
            for name in self._productions:
                if name in unused:
                    print('\t%s' % name, file=diagnostics)

        return Grammar(self.language, self.case_sensitive, copy(self._productions))
