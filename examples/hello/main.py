#!/usr/bin/env python3
"""
Minimal host for the stache compiler.

Renders a hard-coded template against a hard-coded data mapping and
prints the result:

    $ python examples/hello/main.py
    <h1>data text</h1>
"""

from stache import compile


def main():
    template = "<h1>{{ .text }}</h1>"
    data = {"text": "data text"}

    print(compile(data, template))


if __name__ == "__main__":
    main()
