from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from backend.app.main import app


def main() -> int:
    spec = app.openapi()
    paths = spec.get("paths", {})
    required_paths = {
        "/api/health": {"get"},
        "/api/restaurants": {"get", "post"},
        "/api/restaurants/{restaurant_id}": {"get", "put", "delete"},
        "/api/restaurants/radius": {"post"},
        "/api/restaurants/range": {"post"},
    }

    errors = []
    for path, methods in required_paths.items():
        missing = methods - set(paths.get(path, {}))
        if missing:
            errors.append(f"{path}: {', '.join(sorted(missing))}")
    if errors:
        for error in errors:
            print(f"[오류] OpenAPI 스펙에 경로/메서드가 없습니다: {error}", file=sys.stderr)
        return 1

    print("OpenAPI 필수 경로 검증 완료")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
