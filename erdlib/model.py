"""
AST produced by parsing one line of ERD notation.

Nodes are immutable. Two nodes compare equal when their content is equal;
source locations are kept for reporting but never take part in comparison.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from erdlib.common import Location


class Unbounded:
    """
    The `*` cardinality bound. Use the `UNBOUNDED` singleton.
    """
    __slots__ = []

    def __repr__(self):
        return 'UNBOUNDED'

    def __str__(self):
        return '*'

    def __reduce__(self):
        return 'UNBOUNDED'


UNBOUNDED = Unbounded()

CardinalityBound = Union[int, Unbounded]


def _span(location):
    if location is None:
        return ''
    return f' [{location.start_position}->{location.end_position}]'


@dataclass(frozen=True)
class Attribute:
    """
    Name of a relation member. Either a `PrimaryKey` or a `Plain` attribute,
    never instantiated directly.
    """
    name: str
    location: Optional[Location] = field(default=None, compare=False,
                                         repr=False)

    def is_primary_key(self):
        raise NotImplementedError

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class PrimaryKey(Attribute):
    """Attribute written as `_name_`."""

    def is_primary_key(self):
        return True

    def __str__(self):
        return f'_{self.name}_'


@dataclass(frozen=True)
class Plain(Attribute):
    def is_primary_key(self):
        return False


@dataclass(frozen=True)
class MinMax:
    """
    Cardinality given in `[min,max]` notation. Bounds are not checked
    against each other.
    """
    min: CardinalityBound
    max: CardinalityBound
    location: Optional[Location] = field(default=None, compare=False,
                                         repr=False)

    def is_unbounded(self):
        return self.max is UNBOUNDED

    def __str__(self):
        return f'[{self.min},{self.max}]'


@dataclass(frozen=True)
class Ref:
    """
    A member of a relation. With cardinality it references another entity,
    without it is an ordinary attribute.
    """
    attribute: Attribute
    cardinality: Optional[MinMax] = None
    location: Optional[Location] = field(default=None, compare=False,
                                         repr=False)

    @property
    def name(self):
        return self.attribute.name

    def is_entity_ref(self):
        return self.cardinality is not None

    def is_primary_key(self):
        return self.attribute.is_primary_key()

    def to_str(self):
        if self.is_entity_ref():
            kind = f'entity ref {self.cardinality}'
        elif self.is_primary_key():
            kind = 'primary key'
        else:
            kind = 'attribute'
        return f'{self.name}: {kind}{_span(self.location)}'

    def __str__(self):
        if self.cardinality is None:
            return str(self.attribute)
        return f'{self.attribute}{self.cardinality}'


@dataclass(frozen=True)
class ERDExpression:
    """
    A named relation and its members in declaration order.

    A relation with at least one entity reference is a relationship,
    otherwise it is an entity type.
    """
    name: str
    members: Tuple[Ref, ...]
    location: Optional[Location] = field(default=None, compare=False,
                                         repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'members', tuple(self.members))
        if not self.members:
            raise ValueError(f'Relation "{self.name}" must have at least '
                             'one member.')

    def is_relationship(self):
        return any(m.is_entity_ref() for m in self.members)

    def is_entity_type(self):
        return not self.is_relationship()

    def entity_refs(self):
        return [m for m in self.members if m.is_entity_ref()]

    def attributes(self):
        return [m for m in self.members if not m.is_entity_ref()]

    def primary_keys(self):
        """
        Returns names of primary key members in declaration order.
        """
        return [m.name for m in self.members if m.is_primary_key()]

    def to_str(self):
        """
        Returns an indented, human readable dump of the tree.
        """
        kind = 'relationship' if self.is_relationship() else 'entity type'
        s = f'{self.name}: {kind}{_span(self.location)}'
        for member in self.members:
            s += '\n  ' + member.to_str()
        return s

    def __str__(self):
        return '{}({})'.format(self.name,
                               ', '.join(str(m) for m in self.members))
