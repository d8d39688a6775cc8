HTTP_METHODS = {"get", "post", "put", "patch", "delete", "options", "head", "trace"}


def collect_routes(app):
    """Flatten the app's documented routes into (path, methods, name) rows sorted by path.

    Read from the OpenAPI schema so nested routers are covered whatever
    FastAPI does with included routers internally.
    """
    rows = []
    for path, path_item in app.openapi().get("paths", {}).items():
        operations = {method: operation for method, operation in path_item.items() if method in HTTP_METHODS}
        methods = sorted(method.upper() for method in operations)
        names = sorted({operation.get("operationId", "unnamed") for operation in operations.values()})
        rows.append((path, ", ".join(methods), ", ".join(names)))
    return sorted(rows)


def run():
    """Display all URL patterns of the application"""
    from app.main import app

    rows = collect_routes(app)
    if not rows:
        print("No routes found.")
        return

    path_width = max(10, *(len(path) for path, _, _ in rows))
    method_width = max(7, *(len(methods) for _, methods, _ in rows))
    header = f"{'Path':<{path_width}} | {'Methods':<{method_width}} | Name"
    print(header)
    print("-" * len(header))
    for path, methods, name in rows:
        print(f"{path:<{path_width}} | {methods:<{method_width}} | {name}")
    print(f"\nTotal routes: {len(rows)}")

if __name__ == "__main__":
    run()
