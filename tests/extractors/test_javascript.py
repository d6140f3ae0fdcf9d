"""Tests for the JavaScript/TypeScript extractor profile."""

from __future__ import annotations

import textwrap

import pytest

from structdoc.extractors import extract
from structdoc.extractors.javascript import JavaScriptExtractor


def _source(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


def test_detects_import_forms() -> None:
    content = _source(
        """
        import React from "react";
        import { useState, useEffect } from 'react';
        import * as path from "path";
        const lazy = import("./lazy");
        """
    )

    analysis = JavaScriptExtractor().extract(content)

    assert analysis.imports == [
        'import React from "react"',
        "import { useState, useEffect } from 'react'",
        'import * as path from "path"',
    ]


def test_detects_functions_and_exports() -> None:
    content = _source(
        """
        export function foo() {}
        const bar = (a, b) => a + b;
        export const baz = async () => {};
        async function qux(x) {
          return x;
        }
        export interface Options {}
        export type Id = string;
        """
    )

    analysis = JavaScriptExtractor().extract(content)

    assert analysis.functions == ["foo", "bar", "baz", "qux"]
    assert analysis.exports == ["foo", "baz", "Options", "Id"]


def test_detects_classes_with_and_without_export() -> None:
    content = _source(
        """
        export class Service {}
        class Helper extends Base {}
        """
    )

    analysis = JavaScriptExtractor().extract(content)

    assert analysis.classes == ["Service", "Helper"]


def test_methods_skip_control_flow_keywords_and_capitalized_names() -> None:
    content = _source(
        """
        class Store {
          constructor(options) {
            this.options = options;
          }
          private async load(id) {
            if (id) {
              for (const item of items) {}
            }
            while (running) {}
            switch (mode) {}
            try {} catch (err) {}
          }
          save() {
            return Widget(props) {};
          }
        }
        """
    )

    analysis = JavaScriptExtractor().extract(content)

    assert analysis.methods == ["load", "save"]


def test_methods_skip_names_containing_uppercase_letters() -> None:
    content = "class S {\n  getData() {\n    return 1;\n  }\n  load() {}\n}\n"

    analysis = JavaScriptExtractor().extract(content)

    assert analysis.methods == ["load"]


def test_components_follow_capitalized_naming_convention() -> None:
    content = _source(
        """
        const Header = (props) => <h1>{props.title}</h1>;
        const Footer = () => {
          return null;
        };
        const helper = () => null;
        """
    )

    analysis = JavaScriptExtractor().extract(content)

    assert analysis.components == ["Header", "Footer"]
    assert "helper" not in analysis.components


def test_overlapping_patterns_are_not_deduplicated() -> None:
    content = "function run() {}\nfunction run() {}\n"

    analysis = JavaScriptExtractor().extract(content)

    assert analysis.functions == ["run", "run"]


@pytest.mark.parametrize("extension", [".js", ".ts", ".jsx", ".tsx"])
def test_extract_dispatches_c_family_extensions(extension: str) -> None:
    analysis = extract("export function foo() {}\n", extension)

    assert analysis.functions == ["foo"]
    assert analysis.exports == ["foo"]


@pytest.mark.parametrize(
    "content",
    ["", "   \n\t\n", "function broken( {\n  if (x {\n", "class {{{ ((( ]]]", "import { a, b from"],
)
def test_malformed_input_does_not_raise(content: str) -> None:
    analysis = JavaScriptExtractor().extract(content)

    assert analysis.imports == []
    assert analysis.exports == []
