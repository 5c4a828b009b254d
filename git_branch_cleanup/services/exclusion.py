"""Exclusion policy: branches that are never deleted"""

from typing import Iterable, List, Sequence, Union


def split_exclusions(raw: str) -> List[str]:
    """Split a comma-separated exclusion string.

    An empty string yields ``[""]``, which never matches a branch name.
    """
    return raw.split(",")


def build_exclusions(
    exclude: Union[str, Iterable[str], None],
    main_branch: str,
    protected_branches: Iterable[str] = (),
) -> List[str]:
    """
    Build the exclusion list for one invocation.

    Args:
        exclude: Comma-separated string or list of branch names
        main_branch: Primary branch, appended unless already listed
        protected_branches: Trunk names appended unless already listed

    Returns:
        Trimmed branch names, always including the protected and primary branches
    """
    if exclude is None:
        entries = []
    elif isinstance(exclude, str):
        entries = split_exclusions(exclude)
    else:
        entries = list(exclude)

    names = [entry.strip() for entry in entries]

    for protected in [*protected_branches, main_branch]:
        protected = protected.strip()
        if protected and protected not in names:
            names.append(protected)
    return names


def is_excluded(branch: str, exclude: Sequence[str]) -> bool:
    """Check if a branch is in the exclusion list, ignoring surrounding whitespace."""
    return any(branch == entry.strip() for entry in exclude)
