import sys

from trie_autocompleter.cli.cli import main

sys.exit(main())
