import inspect

class Node:
    """Base class for nodes described by class annotations.

    The annotated attributes of a node class (and its bases) form the
    node's fields. They can be passed positionally, in the order
    the annotations appear, or by keyword. A field with a class-level
    default may be omitted.

    >>> class Pair(Node):
    ...     first: str
    ...     second: int = 0
    >>> Pair('a', second=2)
    Pair(first='a', second=2)
    >>> Pair(first='b')
    Pair(first='b', second=0)
    >>> Pair('a') == Pair('a', 0)
    True
    >>> Pair()
    Traceback (most recent call last):
        ...
    TypeError: Pair() missing field 'first'
    """

    def __init__(self, *args, **kw):
        keys = list(self.keys())
        if len(args) > len(keys):
            raise TypeError('%s() takes at most %d fields' % (type(self).__name__, len(keys)))
        for k, v in zip(keys, args):
            if k in kw:
                raise TypeError('%s() got multiple values for field %r' % (type(self).__name__, k))
            kw[k] = v
        for k in keys:
            if k in kw:
                v = kw.pop(k)
            elif hasattr(type(self), k):
                v = getattr(type(self), k)
            else:
                raise TypeError('%s() missing field %r' % (type(self).__name__, k))
            setattr(self, k, v)
        if kw:
            raise TypeError('%s() got unexpected fields: %s' % (type(self).__name__, ', '.join(sorted(kw))))

    def keys(self):
        seen = set()
        for base in reversed(inspect.getmro(type(self))):
            for k in inspect.get_annotations(base):
                if k not in seen:
                    seen.add(k)
                    yield k

    def items(self):
        for k in self.keys():
            v = getattr(self, k)
            yield (k, v)

    def clone(self):
        """Returns a deep copy of the node.

        Child nodes, directly or inside lists, are cloned as well.
        Attributes that are not fields are not copied.

        >>> class Box(Node):
        ...     parts: list
        >>> b = Box([Box([])])
        >>> c = b.clone()
        >>> c == b, c.parts[0] is b.parts[0]
        (True, False)
        """
        def _clone(v):
            if isinstance(v, Node):
                return v.clone()
            if isinstance(v, list):
                return [_clone(e) for e in v]
            return v
        return type(self)(**dict((k, _clone(v)) for k, v in self.items()))

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __ne__(self, other):
        r = self.__eq__(other)
        return r if r is NotImplemented else not r

    __hash__ = None

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join('%s=%r' % kv for kv in self.items()))
