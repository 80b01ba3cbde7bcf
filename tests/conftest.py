"""Shared schema fixtures."""

import pytest
from graphql import build_schema

SDL = """
scalar Money

enum Role {
  ADMIN
  USER
}

interface Node {
  id: ID!
}

type Person implements Node {
  id: ID!
  name: String
  age: Int
  role: Role
  salary: Money
  friends: [Person!]!
  tags: [Tag]
  pet: Animal
  node: Node
}

type Tag {
  id: ID!
  label: String
}

type Cat {
  meow: String
  name: String
}

type Dog {
  bark: String
  name: String
}

union Animal = Cat | Dog

input PersonFilter {
  role: Role
}

type Query {
  person(id: ID!): Person
  people(filter: PersonFilter, limit: Int): [Person!]!
  animal: Animal
}

type Mutation {
  rename(id: ID!, name: String!): Person
}
"""


@pytest.fixture
def sdl():
    return SDL


@pytest.fixture
def schema():
    return build_schema(SDL)
