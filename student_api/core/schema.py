"""
Table definitions.

Applied once at startup with `CREATE TABLE IF NOT EXISTS`; existing tables are
left as they are.
"""

from __future__ import annotations

import logging

from . import db

logger = logging.getLogger(__name__)

TABLES_DDL = """
CREATE TABLE IF NOT EXISTS students (
    id bigserial PRIMARY KEY,
    first_name varchar(255) NOT NULL,
    last_name varchar(255) NOT NULL,
    student_id varchar(50) NOT NULL UNIQUE,
    birth_date date NOT NULL,
    gender varchar(10) NOT NULL
);

CREATE TABLE IF NOT EXISTS books (
    id bigserial PRIMARY KEY,
    title text NOT NULL,
    author text NOT NULL,
    detail text NOT NULL,
    synopsis text NOT NULL,
    type text NOT NULL,
    published_at timestamptz NOT NULL
);

CREATE TABLE IF NOT EXISTS typecoffee (
    id bigserial PRIMARY KEY,
    type text NOT NULL
);

CREATE TABLE IF NOT EXISTS coffee (
    id bigserial PRIMARY KEY,
    typecoffee_id bigint NOT NULL REFERENCES typecoffee (id),
    count integer NOT NULL,
    description text NOT NULL,
    customer_name text NOT NULL
);
"""


async def create_tables(store: db.Store) -> None:
    await db.execute(store, TABLES_DDL)
    logger.info("Database tables are in place.")
