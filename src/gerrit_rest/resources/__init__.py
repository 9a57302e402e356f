"""
Endpoint functions per Gerrit resource family.

Every function takes a GerritClient first and delegates the round trip to it;
path segments that are user data are escaped here.
"""

from . import access, accounts, changes, config, events, groups, plugins, projects, revisions

__all__ = [
    "access",
    "accounts",
    "changes",
    "config",
    "events",
    "groups",
    "plugins",
    "projects",
    "revisions",
]
