"""
Output logic for picsort.
"""

import sys
import time

from picsort.models import AppConfig, CopyReport, colorize, colors


def get_schema(cfg: AppConfig) -> str:
    """Get schema string based on current configuration."""
    arrow = colorize("→", colors.yellow)
    folder = colorize("YYYY/MM/DD", colors.cyan)
    return f"FileName.Ext {arrow} {cfg.target_dir}/{folder}/FileName.Ext"


def get_status(value: bool) -> str:
    """Get colored ON/OFF status."""
    return colorize("ON", colors.green) if value else colorize("OFF", colors.red)


def get_elapsed_time(start_time: float) -> tuple[str, str]:
    """Get elapsed time since script start."""
    elapsed_time = (time.time() - start_time) * 1000
    time_factor = "ms" if elapsed_time < 1000 else "s"
    elapsed_time = elapsed_time / 1000 if elapsed_time >= 1000 else elapsed_time
    return f"{elapsed_time:.2f}", time_factor


def printe(message: str, exit_code: int = 1) -> None:
    """Print error message and exit with given exit code."""
    msg = message if exit_code == 0 else f"{colorize('Error', colors.red)}: {message}"
    print(msg)
    sys.exit(exit_code)


def print_settings(cfg: AppConfig) -> None:
    """Print settings using AppConfig internal method."""
    cfg.print_config(show_all=False)


def print_header(cfg: AppConfig) -> None:
    """Print the header information based on current configuration."""
    if cfg.quiet:
        return
    print(
        f"{colorize('Media Sorting Script', colors.green)} ({colorize(cfg.script_name, colors.green)}) v{cfg.script_version}"
    )
    if cfg.show_settings:
        print_settings(cfg)
    print(f"{colorize('Schema:', colors.yellow)}")
    print(f"{cfg.indent}{get_schema(cfg)}")
    print(f"{colorize('Settings:', colors.yellow)}")
    print(f"{cfg.indent}Source: {colorize(str(cfg.source_dir), colors.cyan)}")
    print(f"{cfg.indent}Target: {colorize(str(cfg.target_dir), colors.cyan)}")
    print(f"{cfg.indent}Recursive: {get_status(cfg.recursive)}")
    if cfg.verbose or cfg.strict:
        print(f"{cfg.indent}Strict metadata: {get_status(cfg.strict)}")
    if cfg.verbose or cfg.test:
        print(f"{cfg.indent}Test mode: {get_status(cfg.test)}")
    print(f"{colorize('Processing:', colors.yellow)}")


def print_footer(report: CopyReport, cfg: AppConfig) -> None:
    """Print the footer summary of a copy run."""
    if cfg.quiet:
        return
    time_elapsed, time_factor = get_elapsed_time(cfg.start_time)
    print(f"{colorize('Summary:', colors.yellow)}")
    if cfg.test:
        print(f"{cfg.indent}Test mode (no changes made).")
    print(
        f"{cfg.indent}Copied files: {colorize(str(report.copied_files), colors.cyan)}/{report.total_files}"
    )
    print(f"{cfg.indent}Skipped files: {len(report.skipped)}")
    if report.failed:
        print(f"{cfg.indent}Failed files: {colorize(str(len(report.failed)), colors.red)}")
    print(f"{cfg.indent}Completed in: {colorize(time_elapsed, colors.cyan)} {time_factor}.")
