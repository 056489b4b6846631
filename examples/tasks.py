from tinycli import Cmd


def build(cmd: Cmd) -> int:
    print(f"Building into {cmd.flag('output', 'dist')}")
    return 0


def clean(cmd: Cmd) -> int:
    print("Removing build artifacts")
    return 0


def show_help(cmd: Cmd, name: str) -> int:
    cmd.app.render_help()
    return 0 if not name else 1
