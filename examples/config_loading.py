"""config_loading.py"""
import sys

from tinycli.config import loader

app = loader("tinycli.yaml")

if __name__ == "__main__":
    sys.exit(app.run(sys.argv[1:]))
