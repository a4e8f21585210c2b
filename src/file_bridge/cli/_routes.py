"""``file-bridge routes``: the bridge's routes in the order they are matched."""

from file_bridge.views import create_app


def print_routes() -> None:
    rows = [("METHOD", "PATH", "HANDLER")]
    for route in create_app().routes:
        handler = route.handler.__name__
        if route.name and route.name != handler:
            handler = f"{handler} ({route.name})"
        rows.append((route.method, route.path, handler))

    method_width = max(len(row[0]) for row in rows)
    path_width = max(len(row[1]) for row in rows)
    for index, (method, path, handler) in enumerate(rows):
        print(f"{method:<{method_width}}  {path:<{path_width}}  {handler}")
        if index == 0:
            print("-" * (method_width + path_width + 4 + max(len(row[2]) for row in rows)))
