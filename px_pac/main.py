#!/usr/bin/env python3
"""
Command line entry point for px PAC.

Evaluates a PAC file for one or more URLs and prints the proxies each
URL would use.
"""

import sys
import logging
import argparse
from typing import List, Optional


def setup_logging(log_level: str = "INFO"):
    """Set up application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="px-pac",
        description="Resolve the proxies a PAC file selects for URLs"
    )
    parser.add_argument("urls", nargs="+", metavar="URL", help="URL to resolve")
    parser.add_argument("--pac", required=True, help="Path to the PAC file")
    parser.add_argument("--identity", default=None,
                        help="Location the PAC file was loaded from (defaults to --pac)")
    parser.add_argument("--engine", choices=["auto", "quickjs", "execjs"], default=None,
                        help="Script engine to use")
    parser.add_argument("--config-dir", default=None, help="Configuration directory")
    parser.add_argument("--log-level", default=None, help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    from px_pac.config.config_manager import ConfigManager
    from px_pac.config.selector_settings import SelectorSettings
    from px_pac.models.script_source import StringPacScriptSource
    from px_pac.selector.pac_selector import PacProxySelector
    from px_pac.error_handling.errors import CallerError
    
    settings = ConfigManager(args.config_dir).load_settings()
    overrides = {'engine': args.engine, 'log_level': args.log_level}
    try:
        settings = SelectorSettings.from_dict(
            {**settings.to_dict(), **{k: v for k, v in overrides.items() if v}}
        )
    except ValueError as e:
        parser.error(str(e))
    
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    
    try:
        with open(args.pac, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        logger.error(f"Failed to read PAC file {args.pac}: {e}")
        return 2
    
    source = StringPacScriptSource(content, source_path=args.identity or args.pac)
    selector = PacProxySelector(source, settings)
    
    for url in args.urls:
        try:
            proxies = selector.select(url)
        except CallerError as e:
            logger.error(f"Skipping {url!r}: {e}")
            continue
        print(f"{url} -> {'; '.join(p.to_pac_string() for p in proxies)}")
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
