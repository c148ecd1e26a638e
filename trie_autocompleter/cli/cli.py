"""
cli.py - line oriented command interface for the dictionary engine
Features:
- INSERT / REMOVE / AUTOCOMPLETE / AUTOCORRECT / LOAD / EXIT protocol, one command per line
- Results on stdout, one per line; diagnostics on stderr through Rich
- Bad commands are reported and skipped, the stream keeps going
- Optional per-command timings (--stats)
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from trie_autocompleter.cli.registry import CommandRegistry
from trie_autocompleter.core.autocomplete import parse_mode
from trie_autocompleter.core.engine import DictionaryEngine
from trie_autocompleter.core.errors import (
    DictionaryLoadError,
    InvalidInputError,
    ResourceExhaustedError,
)
from trie_autocompleter.utils.config_manager import Config
from trie_autocompleter.utils.logger_utils import configure_logging, time_block
from trie_autocompleter.utils.metrics_tracker import Metrics

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 3


def _check_mode(args):
    try:
        parse_mode(args[1])
    except InvalidInputError as e:
        return str(e)
    return None


def _check_distance(args):
    try:
        k = int(args[1])
    except ValueError:
        return f"k must be an integer (got {args[1]!r})"
    if k < 0:
        return f"k must be >= 0 (got {k})"
    return None


class CLI:
    """Runs protocol commands against one DictionaryEngine owned by this session."""

    def __init__(self, engine=None, config=None, out=None, err=None, metrics=None):
        """
        out/err: file-like objects for results and diagnostics
        (default stdout/stderr). Tests pass io.StringIO here.
        """
        self.cfg = config or Config()
        self.engine = engine or DictionaryEngine(max_word_length=self.cfg["max_word_length"])
        self.metrics = metrics or Metrics(self.cfg["metrics_file"])

        # results must come out byte for byte, so no markup/highlighting on stdout
        self.console = Console(file=out, highlight=False, markup=False, emoji=False, soft_wrap=True)
        self.err_console = Console(file=err, stderr=err is None, highlight=False,
                                   no_color=not self.cfg["color"], soft_wrap=True)

        self.running = True
        self.registry = CommandRegistry()
        self._register_commands()

    def _register_commands(self):
        r = self.registry
        r.add_command("INSERT", self._insert, 1, "INSERT <word>")
        r.add_command("REMOVE", self._remove, 1, "REMOVE <word>")
        r.add_command("AUTOCOMPLETE", self._autocomplete, 2, "AUTOCOMPLETE <prefix> <mode>")
        r.add_command("AUTOCORRECT", self._autocorrect, 2, "AUTOCORRECT <word> <k>")
        r.add_command("LOAD", self._load, 1, "LOAD <filename>")
        r.add_command("EXIT", self._exit, 0, "EXIT")
        r.add_validator("AUTOCOMPLETE", _check_mode)
        r.add_validator("AUTOCORRECT", _check_distance)

    # LOOP -------------------------------------------------------------------------
    def run(self, stream=None):
        """
        Execute commands from `stream` (default stdin) until EXIT or end of input.
        A terminal gets a prompt; pipes and files are read line by line.
        ResourceExhaustedError is not caught: it ends the session.
        """
        stream = sys.stdin if stream is None else stream
        try:
            if stream.isatty():
                self._run_interactive()
            else:
                for line in stream:
                    if not self.execute(line):
                        break
        finally:
            self._shutdown()

    def _run_interactive(self):
        self.err_console.rule("[bold magenta]Trie Autocompleter[/bold magenta]")
        self.err_console.print("Commands: " + " ".join(self.registry.names()) + "\n")
        while self.running:
            try:
                line = Prompt.ask("[green]>[/green]", console=self.err_console, default="",
                                  show_default=False)
            except (EOFError, KeyboardInterrupt):
                break
            self.execute(line)

    def execute(self, line):
        """Run one command line. Returns False once the session has ended."""
        if not self.running:
            return False
        tokens = line.split()
        if not tokens:
            return True

        name, args = tokens[0], tokens[1:]
        if name not in self.registry:
            self._error(f"unknown command: {name}")
            return True

        record = self.metrics if self.cfg["record_metrics"] else None
        try:
            with time_block(name, record):
                self.registry.dispatch(name, args)
        except InvalidInputError as e:
            self._error(str(e))
        return self.running

    # COMMANDS ---------------------------------------------------------------------
    def _insert(self, word):
        self.engine.insert(word)

    def _remove(self, word):
        self.engine.remove(word)

    def _autocomplete(self, prefix, mode):
        for result in self.engine.autocomplete(prefix, int(mode)):
            self._emit(result)

    def _autocorrect(self, word, k):
        matches = self.engine.autocorrect(word, int(k))
        if not matches:
            self._emit(None)
        for m in matches:
            self._emit(m)

    def _load(self, filename):
        try:
            report = self.engine.load(filename)
        except DictionaryLoadError:
            self._error(self.cfg["load_error_message"])
            return
        if report.skipped:
            self._error(f"{filename}: skipped {len(report.skipped)} invalid word(s)")

    def _exit(self):
        self.engine.close()
        self.running = False

    # OUTPUT -----------------------------------------------------------------------
    def _emit(self, result):
        """One result line; None prints the not-found message."""
        self.console.print(self.cfg["not_found_message"] if result is None else result)

    def _error(self, msg):
        logger.debug("command error: %s", msg)
        self.err_console.print(f"[red]{escape(msg)}[/red]")

    # EXIT -------------------------------------------------------------------------
    def _shutdown(self):
        """Release the trie if the stream ended without EXIT; persist metrics."""
        if not self.engine.closed:
            self.engine.close()
        self.running = False
        self.metrics.save()


def build_parser():
    parser = argparse.ArgumentParser(
        prog="trie-autocompleter",
        description="Prefix-tree dictionary with autocomplete and autocorrect commands.",
    )
    parser.add_argument("script", nargs="?", help="file with one command per line (default: stdin)")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", help="also write log records to this file")
    parser.add_argument("--stats", action="store_true", help="print command timings on exit")
    parser.add_argument("--no-color", action="store_true", help="plain diagnostics on stderr")
    return parser


def main(argv=None, out=None, err=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = Config(args.config)
    if args.log_level:
        cfg.set("log_level", args.log_level, persist=False)
    if args.log_file:
        cfg.set("log_file", args.log_file, persist=False)
    if args.no_color:
        cfg.set("color", False, persist=False)
    if args.stats:
        cfg.set("record_metrics", True, persist=False)

    configure_logging(cfg["log_level"], cfg["log_file"], cfg["color"])
    cli = CLI(config=cfg, out=out, err=err)

    try:
        if args.script:
            try:
                stream = open(args.script, "r", encoding="utf8")
            except OSError as e:
                parser.error(f"cannot open {args.script}: {e}")
            with stream:
                cli.run(stream)
        else:
            cli.run()
    except ResourceExhaustedError as e:
        logger.critical("fatal: %s", e)
        cli.err_console.print(f"[bold red]fatal:[/bold red] {escape(str(e))}")
        return EXIT_FATAL

    if args.stats:
        cli.err_console.print(cli.metrics.table())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
