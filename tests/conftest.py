"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

USERS_ROUTER = '''const express = require("express");
const router = express.Router();

/** List users
 * @param {string} status
 * @responseExample 200 {"users":[]}
 */
router.get("/users", listUsers);

/**
 * Create a user
 * @requestBody {"name": "string"}
 * @responseExample 201 {"id": 1}
 */
router.post("/users", createUser);

router.patch("/users/:id", patchUser);
'''

FASTIFY_ROUTES = '''import fastify from "fastify";

const app = fastify();

/** Delete an order
 * @param {number} id
 */
app.route({
  method: "DELETE",
  schema: { params: { id: { type: "number" } } },
  url: "/orders/:id",
  handler: deleteOrder,
});
'''

NEST_CONTROLLER = '''import { Controller, Get, Put } from "@nestjs/common";

@Controller("items")
export class ItemsController {
  /** All items */
  @Get()
  findAll() {}

  /**
   * Replace an item
   * @param {string} id
   * @param {object=} options
   */
  @Put(":id")
  replace() {}
}
'''


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ZEUS_CORE_SERVE_PORT", raising=False)
    monkeypatch.delenv("ZEUS_CORE_INCREMENTAL", raising=False)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A small backend tree using all three declaration styles."""
    (tmp_path / "src" / "routes").mkdir(parents=True)
    (tmp_path / "src" / "routes" / "users.js").write_text(USERS_ROUTER)
    (tmp_path / "src" / "server.ts").write_text(FASTIFY_ROUTES)
    (tmp_path / "src" / "items.controller.ts").write_text(NEST_CONTROLLER)
    (tmp_path / "src" / "util.js").write_text("export const add = (a, b) => a + b;\n")
    (tmp_path / "README.md").write_text('app.get("/not-scanned")\n')
    return tmp_path
