"""Repository browser state machine.

Transitions are pure: ``transition(state, action)`` returns the state to
show while the effect runs and the effect to perform.  Effects that fetch a
listing carry the path stack to commit once the fetch succeeds, so a failed
fetch never leaves the stack pointing at a directory that was not loaded.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable, Union

from artifact_commander.config.settings import settings
from artifact_commander.models import ViewMode
from artifact_commander.models.repo import Crumb, NavigationState, RepoNode


@dataclass(frozen=True)
class Open:
    repository_id: str


@dataclass(frozen=True)
class Descend:
    node: RepoNode


@dataclass(frozen=True)
class OpenFile:
    node: RepoNode


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class BreadcrumbJump:
    path: str


@dataclass(frozen=True)
class Close:
    pass


Action = Union[Open, Descend, OpenFile, Back, BreadcrumbJump, Close]


class EffectKind(enum.Enum):
    NONE = "none"
    FETCH_LISTING = "fetch-listing"
    FETCH_FILE = "fetch-file"
    SHOW_LISTING = "show-listing"
    HIDE = "hide"


@dataclass(frozen=True)
class Effect:
    kind: EffectKind
    path: str = ""
    commit_stack: tuple[str, ...] = ()
    preview_readme: bool = False


NO_EFFECT = Effect(EffectKind.NONE)


def transition(state: NavigationState, action: Action) -> tuple[NavigationState, Effect]:
    if isinstance(action, Open):
        return NavigationState(repository_id=action.repository_id), Effect(
            EffectKind.FETCH_LISTING, path="", commit_stack=(), preview_readme=True,
        )

    if isinstance(action, Close):
        return NavigationState(), Effect(EffectKind.HIDE)

    if not state.is_open:
        return state, NO_EFFECT

    if isinstance(action, Back):
        if state.view_mode is ViewMode.FILE:
            return replace(state, view_mode=ViewMode.TREE), Effect(
                EffectKind.SHOW_LISTING, path=state.current_path, commit_stack=state.path_stack,
            )
        if state.at_root:
            return state, NO_EFFECT
        parent = state.path_stack[:-1]
        return state, Effect(
            EffectKind.FETCH_LISTING, path=parent[-1] if parent else "", commit_stack=parent,
        )

    # Everything below only makes sense while a listing is on screen.
    if state.view_mode is not ViewMode.TREE:
        return state, NO_EFFECT

    if isinstance(action, Descend):
        if not action.node.is_directory:
            return state, NO_EFFECT
        return state, Effect(
            EffectKind.FETCH_LISTING,
            path=action.node.path,
            commit_stack=state.path_stack + (action.node.path,),
        )

    if isinstance(action, OpenFile):
        if action.node.is_directory:
            return state, NO_EFFECT
        return state, Effect(EffectKind.FETCH_FILE, path=action.node.path, commit_stack=state.path_stack)

    if isinstance(action, BreadcrumbJump):
        target = action.path.strip("/")
        if target == state.current_path:
            return state, NO_EFFECT
        return state, Effect(
            EffectKind.FETCH_LISTING, path=target, commit_stack=truncate_stack(state.path_stack, target),
        )

    raise TypeError(f"Unknown navigation action: {action!r}")


def truncate_stack(stack: tuple[str, ...], target: str) -> tuple[str, ...]:
    """Pop entries until the top equals ``target`` ("" pops everything).

    If ``target`` was never on the stack the prefix chain is rebuilt from the
    target path itself.
    """
    if not target:
        return ()
    if target in stack:
        return stack[: stack.index(target) + 1]
    parts = target.split("/")
    return tuple("/".join(parts[: i + 1]) for i in range(len(parts)))


def sort_listing(nodes: Iterable[RepoNode]) -> list[RepoNode]:
    """Directories first, then files; each group ascending by name."""
    return sorted(nodes, key=lambda n: (not n.is_directory, n.name))


def find_readme(nodes: Iterable[RepoNode], readme_name: str | None = None) -> RepoNode | None:
    wanted = (readme_name or settings.readme_name).lower()
    for node in nodes:
        if not node.is_directory and node.name.lower() == wanted:
            return node
    return None


def build_breadcrumb(stack: tuple[str, ...]) -> list[Crumb]:
    """Root crumb plus one crumb per segment of the current directory.

    The last crumb is where we are and is never navigable.
    """
    if not stack:
        return [Crumb(label="/", path="", navigable=False)]
    crumbs = [Crumb(label="/", path="", navigable=True)]
    parts = stack[-1].split("/")
    for i, part in enumerate(parts):
        crumbs.append(Crumb(
            label=part,
            path="/".join(parts[: i + 1]),
            navigable=i < len(parts) - 1,
        ))
    return crumbs
