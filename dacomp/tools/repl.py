"""
Interactive dacomp shell.

Reads one expression per line, prints its value or its diagnostics, and
optionally the parse tree. A blank line ends the session.

Commands:
    #showTree   toggle parse tree display
    #cls        clear the screen
"""

import click
from colorama import Fore, Style, just_fix_windows_console

from .._version import __version__
from ..parser.parser import parse
from ..evaluator.evaluator import Evaluator
from ..evaluator.errors import EvaluationError
from .tree_printer import format_tree


class Repl:
    """Holds the display settings that survive from one line to the next."""

    def __init__(self, show_tree: bool = False, color: bool = True, prompt: str = "> "):
        self.show_tree = show_tree
        self.color = color
        self.prompt = prompt

    def _paint(self, text: str, color: str) -> str:
        if not self.color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def run(self):
        while True:
            try:
                line = click.prompt(self.prompt, default="", show_default=False,
                                    prompt_suffix="")
            except click.Abort:
                break

            if not line.strip():
                break

            if not self.handle_command(line.strip()):
                self.handle_line(line)

    def handle_command(self, line: str) -> bool:
        """Run a '#' command; returns False if ``line`` isn't one."""
        if line == "#showTree":
            self.show_tree = not self.show_tree
            click.echo("Showing parse trees." if self.show_tree else "Not showing parse trees.")
            return True
        if line == "#cls":
            click.clear()
            return True
        return False

    def handle_line(self, line: str):
        tree = parse(line)

        if self.show_tree:
            click.echo(self._paint(format_tree(tree.root), Fore.LIGHTBLACK_EX), nl=False)

        if tree.has_errors():
            for diagnostic in tree.diagnostics:
                click.echo(self._paint(diagnostic, Fore.RED))
            return

        try:
            result = Evaluator(tree.root).evaluate()
        except EvaluationError as e:
            click.echo(self._paint(e.message, Fore.RED))
            return

        click.echo(result)


@click.command(name="dacomp")
@click.option("--show-tree/--hide-tree", default=False, envvar="DACOMP_SHOW_TREE",
              show_default=True, help="Print the parse tree of every line.")
@click.option("--color/--no-color", default=True, show_default=True,
              help="Color tree dumps and diagnostics.")
@click.option("--prompt", default="> ", show_default=True, help="Input prompt.")
@click.version_option(version=__version__, prog_name="dacomp")
def main(show_tree: bool, color: bool, prompt: str):
    """Evaluate integer arithmetic expressions interactively."""
    if color:
        just_fix_windows_console()
    Repl(show_tree=show_tree, color=color, prompt=prompt).run()
