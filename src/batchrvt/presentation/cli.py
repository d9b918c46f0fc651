"""CLI for inspecting and preparing batch session files."""
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from batchrvt.application import script_data_util
from batchrvt.domain.exceptions import DomainException
from batchrvt.domain.options import RevitProcessingOption
from batchrvt.domain.script_data import ScriptData
from batchrvt.infrastructure.config import BatchRvtConfig, load_config
from batchrvt.shared import json_files
from batchrvt.shared.logging import setup_logger, get_logger

NO_PROGRESS_MESSAGE = "no progress yet"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="batchrvt-session",
        description="Inspect and prepare batch session script-data and progress files"
    )
    parser.add_argument('--config', type=Path, help='Config YAML file')
    parser.add_argument('--data-folder', type=Path, help='Session data folder (overrides config)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose')

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('new-path', help='Print a new unique script-data file path')

    new_parser = subparsers.add_parser('new', help='Create a session script-data file and print its path')
    new_parser.add_argument('--revit-file', help='Model file to process')
    new_parser.add_argument('--task-script', help='Task script file')
    new_parser.add_argument('--task-data', help='Opaque data passed to the task script')
    new_parser.add_argument(
        '--processing-option',
        choices=list(RevitProcessingOption.__members__),
        help='Processing mode'
    )

    show_parser = subparsers.add_parser('show', help='Print a script-data file as JSON')
    show_parser.add_argument('path', type=Path)
    show_parser.add_argument('--many', action='store_true', help='File holds an array of records')

    progress_path_parser = subparsers.add_parser(
        'progress-path', help='Print the progress-record path for a script-data file'
    )
    progress_path_parser.add_argument('path', type=Path, help='Script-data file')

    set_progress_parser = subparsers.add_parser('set-progress', help='Write the progress number')
    set_progress_parser.add_argument('path', type=Path, help='Script-data file')
    set_progress_parser.add_argument('number', type=int)

    progress_parser = subparsers.add_parser('progress', help='Print the progress number')
    progress_parser.add_argument('path', type=Path, help='Script-data file')
    progress_parser.add_argument('--wait', type=int, default=0, metavar='N',
                                 help='Retry up to N reads before giving up')
    progress_parser.add_argument('--interval', type=float, default=0.5,
                                 help='Seconds between reads when waiting')

    return parser


def _cmd_new_path(args, config: BatchRvtConfig) -> int:
    print(script_data_util.get_unique_script_data_file_path(config.data_folder))
    return 0


def _cmd_new(args, config: BatchRvtConfig) -> int:
    script_data, path = script_data_util.create_session_script_data(config.data_folder)
    script_data.revit_file_path.set_value(args.revit_file)
    script_data.task_script_file_path.set_value(args.task_script)
    script_data.task_data.set_value(args.task_data)
    if args.processing_option:
        script_data.revit_processing_option.set_value(RevitProcessingOption[args.processing_option])

    if not script_data.save_to_file(path):
        get_logger(__name__).error(f"Failed to write {path}")
        return 1
    print(path)
    return 0


def _cmd_show(args, config: BatchRvtConfig) -> int:
    logger = get_logger(__name__)

    if args.many:
        script_datas = script_data_util.load_many_from_file(args.path)
        if script_datas is None:
            logger.error(f"Could not load script data from {args.path}")
            return 1
        print(json_files.serialize_json([script_data.as_dict() for script_data in script_datas]))
        return 0

    script_data = ScriptData()
    if not script_data.load_from_file(args.path):
        logger.error(f"Could not load script data from {args.path}")
        return 1
    print(script_data.to_json_string())
    return 0


def _cmd_progress_path(args, config: BatchRvtConfig) -> int:
    print(script_data_util.get_progress_record_file_path(args.path))
    return 0


def _cmd_set_progress(args, config: BatchRvtConfig) -> int:
    progress_path = script_data_util.get_progress_record_file_path(args.path)
    if not script_data_util.set_progress_number(progress_path, args.number):
        get_logger(__name__).error(f"Failed to write {progress_path}")
        return 1
    return 0


def _cmd_progress(args, config: BatchRvtConfig) -> int:
    progress_path = script_data_util.get_progress_record_file_path(args.path)
    if args.wait > 0:
        progress_number = script_data_util.wait_for_progress_number(
            progress_path, attempts=args.wait, interval=args.interval
        )
    else:
        progress_number = script_data_util.get_progress_number(progress_path)

    if progress_number is None:
        print(NO_PROGRESS_MESSAGE)
        return 1
    print(progress_number)
    return 0


COMMANDS = {
    'new-path': _cmd_new_path,
    'new': _cmd_new,
    'show': _cmd_show,
    'progress-path': _cmd_progress_path,
    'set-progress': _cmd_set_progress,
    'progress': _cmd_progress,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = get_logger(__name__)
    try:
        config = load_config(config_path=args.config, overrides={'data_folder': args.data_folder})

        log_level = 'DEBUG' if args.verbose else config.log_level
        setup_logger('batchrvt', level=log_level, log_file=config.log_file)

        return COMMANDS[args.command](args, config)

    except DomainException as e:
        logger.error(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130


if __name__ == '__main__':
    sys.exit(main())
