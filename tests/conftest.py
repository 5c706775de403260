# conftest.py - shared documents for the matching tests
import textwrap

import pytest


@pytest.fixture
def ambiguous_document() -> str:
    return "function process(data){\n  console.log(data);\n}\n\nfunction handle(data){\n  console.log(data);\n}"


@pytest.fixture
def greet_document() -> str:
    return textwrap.dedent("""\
        function greet(name) {
          console.log("Hello World");
          return name;
        }""")


@pytest.fixture
def greet_patch() -> str:
    return textwrap.dedent("""\
        <<<<<<< SEARCH
        function greet(name) {
          console.log("Hello");
          return name;
        }
        =======
        function greet(name) {
          console.log("Hello, " + name + "!");
          return name.toUpperCase();
        }
        >>>>>>> REPLACE""")


@pytest.fixture
def handler_document() -> str:
    return textwrap.dedent("""\
        def handler(request):
            validate(request)
            result = compute_old(request)
            log(result)
            return result""")
