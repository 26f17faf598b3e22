"""
Data models for Similar Image Finder.

Contains dataclasses for fingerprint records stored in the similarity index,
the findings reported when two records match, and the result of a scan.
"""

from dataclasses import dataclass, field
from enum import Enum
import os


def format_fingerprint(fingerprint: int) -> str:
    """Format a fingerprint as lowercase hex without zero padding."""
    return format(fingerprint, 'x')


def hamming_distance(a: int, b: int) -> int:
    """
    Number of differing bits between two fingerprints.

    Symmetric and non-negative; 0 means the fingerprints are identical.
    """
    return bin(a ^ b).count('1')


@dataclass(frozen=True)
class Record:
    """
    A fingerprinted image, as stored in the similarity index.

    Attributes:
        fingerprint: 64-bit perceptual hash of the image
        identifier: Path of the file the fingerprint was computed from
    """
    fingerprint: int
    identifier: str

    @property
    def filename(self) -> str:
        """Return just the filename portion of the identifier."""
        return os.path.basename(self.identifier)


class FindingKind(str, Enum):
    """How two records were matched."""
    EXACT = "exact"
    CLOSE = "close"


@dataclass(frozen=True)
class Finding:
    """
    A likely duplicate pair detected on insertion into the index.

    Attributes:
        kind: EXACT for identical fingerprints, CLOSE for distance <= threshold
        identifier: Path of the newly inserted image
        other: Path of the already indexed neighbour it matched
        fingerprint: Fingerprint of the newly inserted image
        distance: Hamming distance between the two fingerprints
    """
    kind: FindingKind
    identifier: str
    other: str
    fingerprint: int
    distance: int = 0

    def describe(self) -> str:
        """Render the finding as a single human-readable line."""
        if self.kind is FindingKind.EXACT:
            return (
                f'possible duplicate: "{self.identifier}" has the same phash '
                f'({format_fingerprint(self.fingerprint)}) as "{self.other}"'
            )
        return (
            f'close match: "{self.identifier}" has phash close '
            f'({format_fingerprint(self.fingerprint)}, dist={self.distance}) '
            f'to "{self.other}"'
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'kind': self.kind.value,
            'identifier': self.identifier,
            'other': self.other,
            'fingerprint': format_fingerprint(self.fingerprint),
            'distance': self.distance,
        }


@dataclass
class ScanResult:
    """
    Outcome of a completed scan.

    Attributes:
        files_scanned: Number of images fingerprinted and inserted
        findings: Findings in the order they were reported
    """
    files_scanned: int = 0
    findings: list = field(default_factory=list)

    @property
    def exact_count(self) -> int:
        """Number of possible duplicate findings."""
        return sum(1 for f in self.findings if f.kind is FindingKind.EXACT)

    @property
    def close_count(self) -> int:
        """Number of close match findings."""
        return sum(1 for f in self.findings if f.kind is FindingKind.CLOSE)
