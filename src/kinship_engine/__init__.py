"""Kinship engine for genealogical family trees.

Answers relationship questions over an immutable snapshot of a family graph:
- Ancestor and descendant traversal by generation and lineage
- Common ancestor search and kinship description
- Cousin search and cousin degree calculation
- Shortest relationship path and its human-readable name
"""

__version__ = "0.1.0"

from .ancestors import (
    count_ancestors,
    find_ancestors,
    get_ancestors_at_generation,
    get_ancestors_by_generation,
)
from .common_ancestor import (
    describe_kinship,
    find_all_common_ancestors,
    find_common_ancestor,
)
from .cousins import calculate_cousin_degree, find_cousins
from .descendants import (
    count_descendants,
    find_descendants,
    get_all_relatives,
    get_descendants_at_generation,
    get_descendants_by_generation,
)
from .exceptions import InvalidRelationshipRecord, KinshipError, TreeFileError
from .labels import RelationshipCategory, RelationshipType
from .loader import load_snapshot, snapshot_from_dict
from .models import (
    AllRelatives,
    AncestorQueryOptions,
    AncestorResult,
    CommonAncestorResult,
    CousinDegree,
    CousinResult,
    DescendantQueryOptions,
    DescendantResult,
    EdgeKind,
    Gender,
    KinshipResult,
    Lineage,
    LineageFilter,
    Person,
    RelationshipPath,
)
from .path_finder import calculate_relationship_name, find_relationship_path
from .snapshot import GraphSnapshot
from .traversal import PedigreeTraversal

__all__ = [
    # Graph
    "GraphSnapshot",
    "load_snapshot",
    "snapshot_from_dict",
    # Models
    "Person",
    "Gender",
    "Lineage",
    "LineageFilter",
    "EdgeKind",
    "AncestorQueryOptions",
    "DescendantQueryOptions",
    "AncestorResult",
    "DescendantResult",
    "AllRelatives",
    "CommonAncestorResult",
    "CousinDegree",
    "CousinResult",
    "RelationshipPath",
    "KinshipResult",
    "RelationshipType",
    "RelationshipCategory",
    # Queries
    "find_ancestors",
    "get_ancestors_at_generation",
    "count_ancestors",
    "get_ancestors_by_generation",
    "find_descendants",
    "get_descendants_at_generation",
    "count_descendants",
    "get_descendants_by_generation",
    "get_all_relatives",
    "find_common_ancestor",
    "find_all_common_ancestors",
    "describe_kinship",
    "find_cousins",
    "calculate_cousin_degree",
    "find_relationship_path",
    "calculate_relationship_name",
    "PedigreeTraversal",
    # Errors
    "KinshipError",
    "InvalidRelationshipRecord",
    "TreeFileError",
]
