"""Shared fixtures: a throwaway definitions tree on disk."""

from __future__ import annotations

from pathlib import Path
import textwrap

import pytest

SETTINGS_YAML = """
title: Users Service
version: 2.1.0
description: Manage users.
application_root: https://api.example.com/base
security:
  schemes:
    bearerAuth:
      type: http
      scheme: bearer
  default: [bearerAuth]
facets:
  exclude: [internal]
namespaces:
  "urn:example:users": u
"""

USERS_API_YAML = """
label: Users
context_path: /api
groups:
  - label: Users
    description: User management.
    resources:
      - path: /users
        methods:
          - method: GET
            name: listUsers
            description: Lists users. Results are paged.
            parameters:
              - name: limit
                in: query
                type: int
                default: 20
            responses:
              - code: 200
                condition: The users.
                type: list[User]
          - method: POST
            label: Create a user
            request: UserCreate
      - path: /users/{id}
        methods:
          - method: GET
            description: Returns the {@link User} with the given {@code id}.
            parameters: [id]
            responses:
              - code: 200
                type: User
                media_types: [application/json, application/xml]
              - code: 404
                condition: No such user.
          - method: DELETE
            facets: [internal]
            parameters: [id]
  - label: Health
    resources:
      - path: /health
        methods:
          - method: GET
            name: listUsers
            security: []
"""

JSON_SYNTAX_YAML = """
syntax: json
types:
  User:
    description: A registered user.
    properties:
      id:
        type: long
        readonly: true
        example: 1
      name: string
      role: Role
  UserCreate:
    properties:
      name:
        type: string
        min_length: 1
  Role:
    values: [ADMIN, MEMBER]
"""

XML_SYNTAX_YAML = """
syntax: xml
types:
  User:
    namespace: "urn:example:users"
    properties:
      id: long
"""


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def definitions_root(tmp_path: Path) -> Path:
    """A directory holding apidoc.yaml, one resource API and two syntaxes."""

    root = tmp_path / "project"
    write_file(root / "apidoc.yaml", SETTINGS_YAML)
    write_file(root / "apis" / "users.yaml", USERS_API_YAML)
    write_file(root / "syntaxes" / "json.yaml", JSON_SYNTAX_YAML)
    write_file(root / "syntaxes" / "xml.yaml", XML_SYNTAX_YAML)
    return root
