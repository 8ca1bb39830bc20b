"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_POST = """\
---
timeToRead: 7
authors:
  - Jay Conrod
  - Eli Bendersky
title: "Organizing a Go module"
excerpt: How to lay out packages, commands and internal code.
date: 2021-03-04
hero: ""
draft: false
---

## Basic package

A *basic* Go package has all its code in the **root** directory.
See [the docs](https://go.dev/doc/modules/layout).

```go
import "github.com/someuser/modname"

if a < b && c > d {
}
```

> Note: the module path is declared in `go.mod`.

## Basic package
"""


@pytest.fixture(name="sample_post")
def sample_post_fixture():
    return SAMPLE_POST
