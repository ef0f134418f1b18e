"""Resolving a target directory into the projects to scan."""

from dataclasses import dataclass, field
from pathlib import Path

from henv.discovery import get_project_env_files
from henv.git import RepoRootResolver, find_git_projects, get_git_root, is_git_repository
from henv.models import Project, ProjectEnvFiles


@dataclass
class Workspace:
    """The projects reachable from a target directory.

    ``single_project`` is True when the target itself is a repository; in
    that case ``projects`` holds exactly that repository.
    """

    root: Path
    single_project: bool
    projects: list[Project] = field(default_factory=list)


def resolve_workspace(target_dir: Path, resolver: RepoRootResolver | None = None) -> Workspace:
    """Decide whether ``target_dir`` is one project or a folder of projects."""
    target_dir = Path(target_dir).absolute()
    if is_git_repository(target_dir):
        project_dir = get_git_root(target_dir, resolver) or target_dir
        project = Project(name=project_dir.name, path=project_dir)
        return Workspace(root=target_dir, single_project=True, projects=[project])
    return Workspace(root=target_dir, single_project=False, projects=find_git_projects(target_dir))


def collect_env_files(projects: list[Project], max_depth: int | None = None) -> list[ProjectEnvFiles]:
    """Discover env files for every project, keeping projects without any."""
    return [
        ProjectEnvFiles(project=project, env_files=get_project_env_files(project.path, max_depth))
        for project in projects
    ]
