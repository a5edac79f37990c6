class Vocabulary:
    """A reusable set of productions to be merged into a grammar.

    The productions are either given directly or produced by `loader`,
    a callable invoked on each `resolve`. Errors raised by the loader
    are not caught. Productions without a vocabulary tag get tagged
    with the vocabulary's language.

    Each call returns fresh copies, so the same vocabulary can be merged
    into several tables without their resolutions affecting each other.

    >>> from grammodel.production import Production
    >>> v = Vocabulary('literals', [Production('digit'), Production('sign', vocabulary='math')])
    >>> [(p.name, p.vocabulary) for p in v.resolve()]
    [('digit', 'literals'), ('sign', 'math')]
    """

    def __init__(self, language, productions=(), loader=None):
        self.language = language
        self._productions = tuple(productions)
        self._loader = loader

    def resolve(self):
        productions = self._loader() if self._loader is not None else self._productions
        return [p.clone(p.vocabulary or self.language) for p in productions]

    def __repr__(self):
        return 'Vocabulary(%r)' % self.language
