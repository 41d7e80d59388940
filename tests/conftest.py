"""Pytest configuration and shared TypeScript fixtures."""

import logging

import pytest

TS_BOX = """
class Box<T> { private value: T; getValue(): T { return this.value; } }
"""

TS_MODULE = """
import * as fs from "fs";
import Default, { Item, Other as Renamed } from "./items";
import type { Options } from "./options";

export interface Shape {
    area(): number;
}

export type Id = string | number;

export class Repository<T extends Item, K = Id> {
    private items: T[];
    protected static count: number;
    name?: string;
    tags;

    constructor(private readonly store: Default, public label: string) {}

    public find(id: K): T | undefined {
        return undefined;
    }

    async load(path: string, options?: Options) {}

    static create<V>(value: V): Renamed {
        return new Renamed(value);
    }

    private merge(left: T | U, right: U & T): U {
        return right;
    }

    get size(): number {
        return this.items.length;
    }
}

class Plain {}
"""


@pytest.fixture
def box_source() -> str:
    """Single generic class with one property and one method."""
    return TS_BOX


@pytest.fixture
def module_source() -> str:
    """File with imports, sibling declarations and two classes."""
    return TS_MODULE


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo CLI logging setup so caplog sees package records."""
    yield
    logger = logging.getLogger("ts_class_interface")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
