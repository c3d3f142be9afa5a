"""
Boot image detection module.

Provides functionality to enumerate a boot directory and classify the
files found there as kernel or initramfs images.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import List, Optional, Union

# Extensions removed before a file name is classified
STRIPPED_EXTENSIONS = ("img",)

INITRD_PATTERNS = ("initrd", "initramfs")
KERNEL_PATTERNS = ("vmlinuz", "vmlinux")


class ItemKind(Enum):
    """Kind of a classified boot image."""
    INITRD = "initrd"
    KERNEL = "kernel"


@dataclass
class Item:
    """
    A classified boot image.

    Attributes:
        kind: Whether the file is a kernel or an initramfs
        version: Version token taken from the file name (None if absent)
        path: Path as written to the config, e.g. '/vmlinuz-6.10.5-arch1'
    """
    kind: ItemKind
    version: Optional[str]
    path: str


def strip_extension(file_name: str) -> str:
    """
    Remove a single known extension from a file name.

    Examples:
        'initramfs-6.10.5-arch1.img' -> 'initramfs-6.10.5-arch1'
        'vmlinuz-6.10.5-arch1' -> 'vmlinuz-6.10.5-arch1'
        'initrd.img.old' -> 'initrd.img.old'
    """
    stem, ext = os.path.splitext(file_name)
    if ext[1:] in STRIPPED_EXTENSIONS:
        return stem
    return file_name


def extract_version(file_name: str) -> Optional[str]:
    """
    Extract the version token from an extension-stripped file name.

    The version is everything after the first hyphen, so
    'vmlinuz-6.10.5-arch1' has version '6.10.5-arch1'. Names without a
    hyphen have no version, and a name whose last segment mentions 'linux'
    is a flavor name rather than a version (e.g. 'vmlinuz-linux'). Only
    the last segment is checked, so 'initramfs-linux-fallback' keeps the
    version 'linux-fallback'.

    Args:
        file_name: Base name with any known extension already removed

    Returns:
        Optional[str]: Version string, or None if absent
    """
    _, separator, version = file_name.partition("-")
    if not separator or "linux" in version.rsplit("-", 1)[-1]:
        return None

    return version


def match_kind(file_name: str) -> Optional[ItemKind]:
    """Match a file name against the initramfs and kernel patterns, in that order."""
    if any(pattern in file_name for pattern in INITRD_PATTERNS):
        return ItemKind.INITRD
    if any(pattern in file_name for pattern in KERNEL_PATTERNS):
        return ItemKind.KERNEL
    return None


def classify(path: Union[str, os.PathLike]) -> Optional[Item]:
    """
    Classify a file as a kernel or initramfs image.

    Only the base name is considered. The returned item's path is the
    base name rooted at '/', since Limine resolves it against the boot
    partition rather than the directory it was found in.

    Args:
        path: Path of the candidate file

    Returns:
        Optional[Item]: Classified item, or None if the file is not a boot image
    """
    base_name = os.path.basename(os.fspath(path))
    if not base_name:
        return None

    # Names that did not decode as UTF-8 carry surrogate escapes
    try:
        base_name.encode("utf-8")
    except UnicodeEncodeError:
        return None

    file_name = strip_extension(base_name)

    kind = match_kind(file_name)
    if kind is None:
        return None

    return Item(
        kind=kind,
        version=extract_version(file_name),
        path=str(PurePosixPath("/") / base_name),
    )


def list_regular_files(scan_dir: Union[str, os.PathLike]) -> List[str]:
    """
    List the regular files directly inside a directory.

    Symlinks are followed. Entries that cannot be inspected (broken links,
    permission errors) are skipped.

    Args:
        scan_dir: Directory to enumerate

    Returns:
        List[str]: Paths of regular files, in directory order

    Raises:
        OSError: If the directory itself cannot be opened
    """
    files = []

    with os.scandir(scan_dir) as entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError:
                # readdir() failed mid-listing; keep what was read so far
                break

            try:
                if entry.is_file():
                    files.append(entry.path)
            except OSError:
                continue

    return files


def scan_directory(scan_dir: Union[str, os.PathLike]) -> List[Item]:
    """
    Find all kernel and initramfs images in a directory.

    Args:
        scan_dir: Directory to scan (non-recursive)

    Returns:
        List[Item]: Classified boot images

    Raises:
        OSError: If the directory itself cannot be opened
    """
    items = []
    for path in list_regular_files(scan_dir):
        item = classify(path)
        if item is not None:
            items.append(item)
    return items
