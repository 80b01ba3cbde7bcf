"""Load schemas and operation documents with graphql-core."""

import json
import logging
import os
from typing import Iterable

from graphql import DocumentNode, GraphQLSchema, build_client_schema, build_schema, concat_ast, parse

log = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")
DOCUMENT_EXTENSIONS = (".graphql", ".gql")


def collect_files(path: str, extensions: tuple[str, ...]) -> list[str]:
    """Collect matching files from a file or directory path."""
    files = []
    if os.path.isfile(path):
        if path.endswith(extensions):
            files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(extensions):
                    files.append(os.path.join(root, filename))
    return sorted(files)


def load_schema(path: str) -> GraphQLSchema:
    """Build a schema from SDL files or an introspection result.

    ``path`` is a ``.json`` introspection result, an SDL file, or a
    directory of SDL files which are concatenated in sorted order.
    """
    if os.path.isfile(path) and path.endswith(".json"):
        with open(path) as f:
            try:
                introspection = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(introspection, dict):
            raise ValueError(f"Introspection result in {path} must be a JSON object")
        log.debug("Building schema from introspection result %s", path)
        try:
            return build_client_schema(introspection.get("data", introspection))
        except TypeError as e:
            # graphql-core reports an incomplete introspection result as a TypeError
            raise ValueError(f"Invalid introspection result in {path}: {e}") from e

    files = collect_files(path, SCHEMA_EXTENSIONS)
    if not files:
        raise FileNotFoundError(f"No schema files found in {path}")

    sources = []
    for file_path in files:
        log.debug("Reading schema file %s", file_path)
        with open(file_path) as f:
            sources.append(f.read())
    return build_schema("\n".join(sources))


def load_documents(paths: Iterable[str]) -> DocumentNode:
    """Parse every operation document and merge them into one."""
    documents = []
    for path in paths:
        files = collect_files(path, DOCUMENT_EXTENSIONS)
        if not files:
            raise FileNotFoundError(f"No documents found in {path}")
        for file_path in files:
            with open(file_path) as f:
                content = f.read()
            try:
                documents.append(parse(content))
            except Exception:
                log.error("Error parsing %s", file_path)
                raise
    return concat_ast(documents)
