"""Run the interactive shell with ``python -m dacomp``."""

from .tools.repl import main

if __name__ == "__main__":
    main(prog_name="dacomp")
