"""Domain template tree — one DDD module with a ping handler.

Extracted into ``src/app/domain/<name>/``; ``__DOMAIN_NAME__`` is replaced
after extraction.
"""

from __future__ import annotations

DOMAIN_MOD_RS = """\
pub mod handler;
pub mod model;
"""

HANDLER_RS = """\
use axum::{routing::get, Json, Router};
use serde_json::json;

#[utoipa::path(get, path = "/__DOMAIN_NAME__/ping", tag = "__DOMAIN_NAME__")]
pub async fn ping() -> Json<serde_json::Value> {
    Json(json!({"ok": true, "domain": "__DOMAIN_NAME__"}))
}

pub fn register___DOMAIN_NAME___routes(router: axum::Router) -> Router {
    router.route("/__DOMAIN_NAME__/ping", get(ping))
}
"""

MODEL_RS = """\
use serde::{Deserialize, Serialize};
use utoipa::ToSchema;

// Table: __DOMAIN_NAME__ (see db/migrations/*_create___DOMAIN_NAME___table)
#[derive(Debug, Clone, Serialize, Deserialize, ToSchema)]
pub struct Record {
    pub id: i64,
}
"""


DOMAIN_FILES: dict[str, str] = {
    "mod.rs": DOMAIN_MOD_RS,
    "handler.rs": HANDLER_RS,
    "model.rs": MODEL_RS,
}
