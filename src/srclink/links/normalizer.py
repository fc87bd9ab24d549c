"""Normalization of repository remote URLs into link components."""

import re

from srclink.core.models.links import UrlComponents
from srclink.core.models.repository import RepositoryDescriptor
from srclink.links.template import expand_vars

# scheme, optional user, host, optional port, path
SSH_PROTOCOL_RE = re.compile(r"^(git|hg|ssh)://([^@/]+@)?([^:/]+)(:[0-9]+)?/(.*)")

# git@ or hg@, host up to the first ':' or '/', optional port, project, repo.
# Unanchored so it also matches ssh://git@host:7999/PROJECT/repo (Bitbucket Server).
SSH_PARTS_RE = re.compile(r"(git|hg)@(.*?)(:[0-9]+)?(:|/)(.*)(/)(.*)")

# user@host:path
SCP_RE = re.compile(r"^([^@]+)@([^:]+):(.*)")


def url_parts(
    repo: RepositoryDescriptor,
    path: str | None,
    line: int | str | None = None,
    rev: str | None = None,
) -> UrlComponents:
    """Break a repository URL and file location into link components.

    SSH-style remotes are rewritten to protocol-relative ``//host/...``
    URLs. Rules are tried in order and the first match wins:

    1. ``git@`` / ``hg@`` remotes with a project and repo segment
       (fills ``hostname``, ``port``, ``project`` and ``repo``)
    2. ``git://``, ``hg://`` and ``ssh://`` URLs (the SSH port is dropped)
    3. bare ``user@host:path`` remotes

    Anything else is assumed to be a browsable URL already and is kept.
    Wiki repositories (``.wiki`` suffix) never get a line anchor.
    """
    url = re.sub(r"\.git$", "", repo.url)
    pattern = repo.url_pattern
    path = path or ""
    filename = path[path.rfind("/") + 1 :]
    hostname = ""
    port = ""
    project = ""
    repo_name = ""

    if line:
        anchor = expand_vars(
            pattern.anchor,
            {"line": line, "filename": filename, "repo": repo.name},
        )
    else:
        anchor = ""

    if url.endswith(".wiki"):
        url = url[: -len(".wiki")] + "/wiki"
        path = re.sub(r"\.md$", "", path)
        anchor = ""

    ssh_parts = SSH_PARTS_RE.search(url)
    ssh_protocol = SSH_PROTOCOL_RE.match(url)
    scp = SCP_RE.match(url)

    if ssh_parts:
        hostname = "//" + ssh_parts.group(2)
        port = ssh_parts.group(3) or ""
        project = ssh_parts.group(5)
        repo_name = ssh_parts.group(7)
        url = hostname + port + "/" + project + "/" + repo_name
    elif ssh_protocol:
        hostname = "//" + ssh_protocol.group(3)
        url = hostname + "/" + ssh_protocol.group(5)
    elif scp:
        url = "//" + scp.group(2) + "/" + scp.group(3)

    return UrlComponents(
        url=url,
        hostname=hostname,
        port=port,
        project=project,
        repo=repo_name,
        path=path,
        rev=rev or "",
        anchor=anchor,
    )
