class MissingProductionError(ValueError):
    """Raised after resolution if some referenced productions are not defined.

    The `missing` attribute maps each missing name to the names
    of the productions that referenced it.
    """
    def __init__(self, message, missing):
        ValueError.__init__(self, message)
        self.missing = missing

class NoRootProductionError(MissingProductionError):
    """Raised if no production is named after the grammar's language."""
    def __init__(self, message, missing, language):
        MissingProductionError.__init__(self, message, missing)
        self.language = language

class Dependencies:
    """Collects references to undefined productions during resolution.

    Missing productions are recorded as they are found and reported
    all at once by `report_missing_productions`.

    >>> from grammodel.production import Production
    >>> deps = Dependencies()
    >>> deps.report_missing_productions()
    >>> deps.missing_production('atom', Production('expr'))
    >>> deps.missing_production('atom', Production('term'))
    >>> deps.missing_production('digit', Production('term'))
    >>> deps.report_missing_productions()
    Traceback (most recent call last):
        ...
    grammodel.dependencies.MissingProductionError: Missing productions:
        'atom' referenced from 'expr', 'term'
        'digit' referenced from 'term'
    """

    def __init__(self):
        self._missing = {}
        self._root = None

    def missing_production(self, name, origin):
        referrers = self._missing.setdefault(name, [])
        if origin.name not in referrers:
            referrers.append(origin.name)

    def missing_root(self, language, placeholder):
        """Records that no production is named after `language`.

        The `placeholder` stands in for the grammar as the referrer.
        """
        self._root = language
        self.missing_production(language, placeholder)

    def report_missing_productions(self):
        if not self._missing:
            return

        lines = []
        if self._root is not None:
            lines.append('No root production for language %r' % self._root)
        lines.append('Missing productions:')
        for name, referrers in self._missing.items():
            lines.append('    %r referenced from %s' % (name, ', '.join(repr(r) for r in referrers)))

        missing = dict((name, tuple(referrers)) for name, referrers in self._missing.items())
        if self._root is not None:
            raise NoRootProductionError('\n'.join(lines), missing, self._root)
        raise MissingProductionError('\n'.join(lines), missing)
