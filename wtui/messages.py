"""Domain records, key events and the messages panels emit."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyMsg:
    """A key press, named the way the terminal reports it (e.g. ``"j"``, ``"esc"``)."""

    key: str


@dataclass(frozen=True)
class Service:
    """One service worktree inside a task."""

    name: str
    branch: str = ""
    base_branch: str = ""
    worktree_path: str = ""
    is_dirty: bool = False
    stale: bool = False
    ahead: int = 0
    behind: int = 0


@dataclass(frozen=True)
class Task:
    """A task directory grouping service worktrees."""

    id: str
    dir: str = ""
    services: tuple[Service, ...] = ()
    stale: bool = False


@dataclass(frozen=True)
class _Signal:
    """A message that carries no data."""


@dataclass(frozen=True)
class _TaskMsg:
    """A message about one task."""

    task_id: str


@dataclass(frozen=True)
class _TaskDirMsg(_TaskMsg):
    """A message about one task and its directory."""

    task_dir: str


@dataclass(frozen=True)
class _ServiceMsg(_TaskMsg):
    """A message about one service of a task."""

    service_name: str


@dataclass(frozen=True)
class _StashMsg(_ServiceMsg):
    """A stash request; ``pop`` restores instead of saving."""

    pop: bool = False


class FocusTasksMsg(_Signal):
    """Move focus to the tasks panel."""


class OpenInitDialogMsg(_Signal):
    """Open the dialog that creates a task."""


class OpenConfigModalMsg(_Signal):
    """Open the configuration view."""


class FocusServicesMsg(_TaskMsg):
    """Move focus to the services of a task."""


class OpenCloneDialogMsg(_TaskMsg):
    """Open the dialog that clones a task."""


class OpenRemoveDialogMsg(_TaskMsg):
    """Open the dialog that removes a task."""


class TaskSelectionChangedMsg(_TaskMsg):
    """The selected task changed."""


class OpenSyncStrategyDialogMsg(_TaskMsg):
    """Ask how to sync a task."""


class PushTaskMsg(_TaskMsg):
    """Push every service of a task."""


class RiderTaskMsg(_TaskDirMsg):
    """Open a task's solution in Rider."""


class CodeWorkspaceTaskMsg(_TaskDirMsg):
    """Open a task's code workspace in the editor."""


class OpenSyncServiceStrategyDialogMsg(_ServiceMsg):
    """Ask how to sync one service."""


class PushServiceMsg(_ServiceMsg):
    """Push one service."""


class StashServiceMsg(_StashMsg):
    """Stash or unstash one service."""


class OpenStashDialogMsg(_StashMsg):
    """Open the stash dialog for one service."""


@dataclass(frozen=True)
class OpenRemoveServiceDialogMsg(_ServiceMsg):
    """Open the dialog that removes one service."""

    branch_name: str


@dataclass(frozen=True)
class OpenAddServiceMsg(_TaskMsg):
    """Open the dialog that adds services to a task."""

    existing_services: tuple[str, ...] = ()


@dataclass(frozen=True)
class OpenLazygitServiceMsg(_TaskMsg):
    """Open lazygit in a service worktree; an empty name means none selected."""

    service_name: str = ""
    worktree_path: str = ""
    stale: bool = False