"""Pick a tmux pane and print its identity.

Entry point for `python -m tmux_selector`.
"""

from .cli import main


if __name__ == "__main__":
    main()
