"""
MEL Resources - URI Resolver
============================
Maps a request path onto a resource variant for the current user.

Shapes are tried in order and the first full match wins. Anything nested
under a project resolves the project first and hands it to the child, which
derives its own mask from the project's.
"""

from __future__ import annotations

import re
from typing import Callable

from core.resources.base import Resource
from core.resources.clients import ClientsResource
from core.resources.deliverables import DeliverableListResource, DeliverableResource
from core.resources.errors import InvalidResource
from core.resources.flag import FlagResource
from core.resources.login import LoginResource
from core.resources.projects import ProjectListResource, ProjectResource

LOGIN_PATH = "/login"

_ID = r"([0-9]+)"


def _resolve_project(username: str, pid: int, dependencies) -> ProjectResource:
    store = dependencies.store
    return ProjectResource(
        username=username,
        pid=pid,
        owns=store.find_ownership(username, pid),
        views=store.find_viewing(username, pid),
        dependencies=dependencies,
    )


def _login(username, match, dependencies, created) -> Resource:
    user = dependencies.store.find_user(username)
    return LoginResource(
        username=username,
        created=created,
        dependencies=dependencies,
        public=user is not None and user.is_public,
    )


def _project_list(username, match, dependencies, created) -> Resource:
    user = dependencies.store.find_user(username)
    if user is None:
        raise InvalidResource(f"Account '{username}' does not exist.")
    return ProjectListResource(
        username=username,
        is_manager=user.is_manager,
        dependencies=dependencies,
    )


def _project(username, match, dependencies, created) -> Resource:
    return _resolve_project(username, int(match.group(1)), dependencies)


def _flag(username, match, dependencies, created) -> Resource:
    project = _resolve_project(username, int(match.group(1)), dependencies)
    return FlagResource(project=project, dependencies=dependencies)


def _clients(username, match, dependencies, created) -> Resource:
    project = _resolve_project(username, int(match.group(1)), dependencies)
    return ClientsResource(project=project, dependencies=dependencies)


def _deliverable_list(username, match, dependencies, created) -> Resource:
    project = _resolve_project(username, int(match.group(1)), dependencies)
    return DeliverableListResource(project=project, dependencies=dependencies)


def _deliverable(username, match, dependencies, created) -> Resource:
    pid = int(match.group(1))
    did = int(match.group(2))
    project = _resolve_project(username, pid, dependencies)
    if not dependencies.store.deliverable_id_in_use(pid, did):
        raise InvalidResource(f"Deliverable {did} of project {pid} does not exist.")
    return DeliverableResource(project=project, did=did, dependencies=dependencies)


RESOURCE_ROUTES: tuple[tuple[re.Pattern, Callable[..., Resource]], ...] = (
    (re.compile(r"/login"), _login),
    (re.compile(r"/projects"), _project_list),
    (re.compile(rf"/projects/{_ID}"), _project),
    (re.compile(rf"/projects/{_ID}/flag"), _flag),
    (re.compile(rf"/projects/{_ID}/clients"), _clients),
    (re.compile(rf"/projects/{_ID}/deliverables"), _deliverable_list),
    (re.compile(rf"/projects/{_ID}/deliverables/{_ID}"), _deliverable),
)


def resolve_resource(
    username: str,
    path: str,
    dependencies,
    *,
    created: bool = False,
) -> Resource:
    """
    Resolve ``path`` for ``username``.

    ``created`` tells the login resource that the account was provisioned
    by the current request. Raises InvalidResource when no shape matches.
    """
    for pattern, build in RESOURCE_ROUTES:
        match = pattern.fullmatch(path)
        if match is not None:
            return build(username, match, dependencies, created)
    raise InvalidResource(f"No resource at '{path}'.")
