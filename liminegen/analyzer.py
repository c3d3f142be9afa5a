"""
Boot entry analysis module.

Pairs classified kernel and initramfs images by version and orders the
resulting boot entries from newest to oldest.
"""

import re
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Dict, List, Optional, Tuple, Union

from .config import Settings
from .detector import Item, ItemKind, scan_directory

ENTRY_TITLE = "Linux"

_PART_PATTERN = re.compile(r"\d+|[A-Za-z]+")


@dataclass
class Entry:
    """
    A bootable entry: one kernel and its initramfs.

    Attributes:
        title: Display title (e.g., 'Linux - 6.10.5-arch1')
        kernel_path: Kernel path as written to the config
        initrd_path: Initramfs path as written to the config
        version: Shared version of both images (None if absent)
    """
    title: str
    kernel_path: str
    initrd_path: str
    version: Optional[str] = None


@dataclass
class DiscardedBucket:
    """
    A version bucket that did not form a clean kernel/initramfs pair.

    Attributes:
        version: Version shared by the files (None if absent)
        paths: Paths of the files in the bucket
        reason: Why no entry was produced
    """
    version: Optional[str]
    paths: List[str]
    reason: str


@dataclass
class AggregationResult:
    """
    Result of pairing boot images.

    Attributes:
        entries: Boot entries, newest version first
        discarded: Buckets that produced no entry
        item_count: Number of classified boot images
    """
    entries: List[Entry]
    discarded: List[DiscardedBucket] = field(default_factory=list)
    item_count: int = 0


def _split_version(version: str) -> List[Union[int, str]]:
    """
    Split a version string into numeric and alphabetic parts.

    Examples:
        '6.10.5-arch1' -> [6, 10, 5, 'arch', 1]
        '5.15.0-82-generic' -> [5, 15, 0, 82, 'generic']
    """
    return [int(part) if part.isdigit() else part for part in _PART_PATTERN.findall(version)]


def _compare_parts(part1: Union[int, str], part2: Union[int, str]) -> int:
    if isinstance(part1, int) and isinstance(part2, int):
        return (part1 > part2) - (part1 < part2)
    if isinstance(part1, int):
        return 1
    if isinstance(part2, int):
        return -1
    return (part1 > part2) - (part1 < part2)


def _compare_remainder(parts: List[Union[int, str]]) -> int:
    """Compare the leftover parts of the longer version against nothing."""
    for part in parts:
        if isinstance(part, str):
            # Trailing text is a pre-release style suffix: '6.10.5-rc1' < '6.10.5'
            return -1
        if part > 0:
            return 1
    return 0


def compare_versions(version1: str, version2: str) -> int:
    """
    Compare two kernel version strings.

    Versions are split into numeric and alphabetic parts and compared part
    by part: numbers numerically, text lexicographically, and a number ranks
    above text. Trailing zero components are ignored, so '6.10' equals
    '6.10.0'. A version that continues with text after the shared prefix
    ranks below the shorter one, as a semver pre-release does.

    Args:
        version1: First version (e.g., '6.10.5-arch1')
        version2: Second version (e.g., '6.9.8-arch1')

    Returns:
        int: -1 if version1 < version2, 0 if equal, 1 if version1 > version2
    """
    parts1 = _split_version(version1)
    parts2 = _split_version(version2)

    for part1, part2 in zip(parts1, parts2):
        result = _compare_parts(part1, part2)
        if result != 0:
            return result

    common = min(len(parts1), len(parts2))
    if len(parts1) > common:
        return _compare_remainder(parts1[common:])
    if len(parts2) > common:
        return -_compare_remainder(parts2[common:])
    return 0


def _checked_compare(version1: str, version2: str) -> int:
    result = compare_versions(version1, version2)
    if result not in (-1, 0, 1):
        raise RuntimeError(
            f"Version comparison of {version1!r} and {version2!r} returned {result!r}"
        )
    if result == 0:
        # Distinct spellings such as '6.10' and '6.10.0' still need a fixed order
        return (version1 > version2) - (version1 < version2)
    return result


def sort_entries(entries: List[Entry]) -> List[Entry]:
    """
    Order entries newest version first, versionless entries last.

    Args:
        entries: Entries in any order

    Returns:
        List[Entry]: New list in boot menu order
    """
    versioned = [entry for entry in entries if entry.version is not None]
    unversioned = [entry for entry in entries if entry.version is None]

    versioned.sort(
        key=cmp_to_key(lambda a, b: _checked_compare(a.version, b.version)),
        reverse=True,
    )

    return versioned + unversioned


def make_title(version: Optional[str]) -> str:
    """Build the menu title for a version ('Linux - 6.10.5' or 'Linux')."""
    if version is None:
        return ENTRY_TITLE
    return f"{ENTRY_TITLE} - {version}"


def try_make_entry(version: Optional[str], items: List[Item]) -> Tuple[Optional[Entry], str]:
    """
    Turn a version bucket into an entry if it holds exactly one kernel and one initramfs.

    Args:
        version: Version shared by the items
        items: Items in the bucket

    Returns:
        Tuple[Optional[Entry], str]: (entry, reason)
            entry: The entry, or None if the bucket was refused
            reason: Why the bucket was refused (empty if an entry was made)
    """
    if len(items) < 2:
        return None, "incomplete pair"
    if len(items) > 2:
        return None, "ambiguous bucket"

    initrds = [item for item in items if item.kind == ItemKind.INITRD]
    kernels = [item for item in items if item.kind == ItemKind.KERNEL]
    if len(initrds) != 1 or len(kernels) != 1:
        return None, "no kernel/initrd split"

    entry = Entry(
        title=make_title(version),
        kernel_path=kernels[0].path,
        initrd_path=initrds[0].path,
        version=version,
    )
    return entry, ""


def aggregate_items(items: List[Item]) -> AggregationResult:
    """
    Group items by version and pair each kernel with its initramfs.

    Buckets that are not exactly one kernel plus one initramfs are refused
    rather than resolved heuristically. A fallback initramfs such as
    'initramfs-linux-fallback.img' carries its own version and is left
    as an incomplete pair.

    Args:
        items: Classified boot images

    Returns:
        AggregationResult: Sorted entries and the refused buckets
    """
    buckets: Dict[Optional[str], List[Item]] = {}
    for item in items:
        buckets.setdefault(item.version, []).append(item)

    entries = []
    discarded = []

    for version, bucket in buckets.items():
        entry, reason = try_make_entry(version, bucket)
        if entry is None:
            discarded.append(DiscardedBucket(
                version=version,
                paths=sorted(item.path for item in bucket),
                reason=reason,
            ))
        else:
            entries.append(entry)

    discarded.sort(key=lambda bucket: (bucket.version is None, bucket.version or ""))

    return AggregationResult(
        entries=sort_entries(entries),
        discarded=discarded,
        item_count=len(items),
    )


def load_entries(settings: Settings) -> AggregationResult:
    """
    Scan the configured directory and build the boot entries.

    Args:
        settings: Run settings

    Returns:
        AggregationResult: Sorted entries and the refused buckets

    Raises:
        OSError: If the scan directory cannot be opened
    """
    return aggregate_items(scan_directory(settings.scan_dir))
