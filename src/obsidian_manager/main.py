"""Unified entry point for Obsidian Manager.

Examples:
  obsidian-manager install
  obsidian-manager next-day --date 2025-10-12 --path ~/Documents/Obsidian/Vault
  python -m obsidian_manager status
"""

from obsidian_manager.interfaces.cli.app import run_cli


def main():
    """Main entry point."""
    run_cli()


if __name__ == "__main__":
    main()
