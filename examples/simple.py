import sys

from tinycli import App, Cmd, Flag
from tinycli.utils import setup_logging

setup_logging()


def build(cmd: Cmd) -> int:
    output = cmd.flag("output", "dist")
    if cmd.is_set("verbose"):
        print(f"Building {cmd.args.tokens or ['.']} into {output}")
    print("Build finished.")
    return 0


def deploy(cmd: Cmd) -> int:
    print(f"Deploying to {cmd.arg(0) or 'staging'}")
    return 0


def before(cmd: Cmd, name: str) -> str | None:
    # Deploying always rebuilds first when --fresh is given.
    if name == "deploy" and cmd.is_set("fresh"):
        build(cmd)
    return None


def unknown(cmd: Cmd, name: str) -> str | None:
    app.render_help()
    return f"Unknown command: {name}" if name else None


app = App(program="simple", before=before, fallback=unknown)
app.register_flag(Flag(long="verbose", short="v", help="Print more output"))
app.add_command(
    "build",
    build,
    help="Build the project",
    flags=[Flag(long="output", short="o", takes_value=True, help="Output directory")],
)
app.add_command(
    "deploy",
    deploy,
    help="Deploy the project",
    flags=[Flag(long="fresh", help="Rebuild before deploying")],
)

# Entry point
if __name__ == "__main__":
    sys.exit(app.run(sys.argv[1:]))
