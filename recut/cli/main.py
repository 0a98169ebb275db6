# recut/cli/main.py
import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from Bio import SeqIO

from recut.cli import COMMANDS
from recut.config import ConfigManager
from recut.core.logging_config import LoggingManager
from recut.error_handlers import handle_exceptions
from recut.exceptions import ValidationError
from recut.range.calculated_cuts import CalculatedCuts
from recut.range.sequence_range import SequenceRange
from recut.utils.sequence import (
    complement_sequence, parse_cut_spec, parse_hcut_spec, placeholder_sequence
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='recut',
                                     description='Fragment a double-stranded sequence at the given cuts')

    # Global options
    parser.add_argument('--config', type=str, help='Path to configuration file')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity (can be used multiple times)')
    parser.add_argument('--log-file', type=str,
                        help='Log to file in addition to stderr')
    parser.add_argument('--log-dir', type=str,
                        help='Directory for log files')
    parser.add_argument('--json', action='store_true',
                        help='Output results as JSON')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    for name, help_text in COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text)
        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument('--size', type=int, help='Sequence length (positions are numbered)')
        source.add_argument('--sequence', type=str, help='Primary strand sequence')
        source.add_argument('--fasta', type=str, help='FASTA file; the first record is used')
        sub.add_argument('--cut', action='append', default=[], metavar='P_LEFT[,P_RIGHT[,C_LEFT[,C_RIGHT]]]',
                         help='Vertical cut after the given positions, empty fields are skipped')
        sub.add_argument('--hcut', action='append', default=[], metavar='LEFT[-RIGHT]',
                         help='Separate the strands over LEFT..RIGHT')
        sub.add_argument('--circular', action='store_true', default=None,
                         help='Treat the sequence as circular')

    subparsers.choices['fragments'].add_argument('--format', choices=['text', 'json', 'tsv'],
                                                 help='Output format')
    return parser


def load_strands(args: argparse.Namespace) -> Tuple[str, str]:
    """Primary and complement strand text for the requested input"""
    if args.sequence:
        primary = args.sequence.strip().upper()
    elif args.fasta:
        record = next(SeqIO.parse(args.fasta, 'fasta'), None)
        if record is None:
            raise ValidationError(f"No FASTA records found in {args.fasta}", {'fasta': args.fasta})
        primary = str(record.seq).upper()
    else:
        if args.size <= 0:
            raise ValidationError(f"Sequence size must be positive, got {args.size}")
        numbering = placeholder_sequence(args.size)
        return numbering, numbering

    if not primary:
        raise ValidationError("Sequence is empty")
    return primary, complement_sequence(primary)


def build_sequence_range(args: argparse.Namespace, size: int, config_manager: ConfigManager) -> SequenceRange:
    circular = args.circular if args.circular is not None else config_manager.is_enabled('sequence.circular')

    sequence_range = SequenceRange(0, size - 1, 0, size - 1, circular=circular,
                                   validate_horizontal_cuts=config_manager.is_enabled('cuts.validate_horizontal'))
    for spec in args.cut:
        sequence_range.add_cut_range(*parse_cut_spec(spec))
    for spec in args.hcut:
        sequence_range.add_horizontal_cut_range(*parse_hcut_spec(spec))
    return sequence_range


def format_fragments(sequence_range: SequenceRange, primary: str, complement: str, output_format: str) -> str:
    fragments = sequence_range.fragments()

    if output_format == 'json':
        return json.dumps(fragments.to_records(primary, complement), indent=2)
    if output_format == 'tsv':
        return fragments.to_dataframe(primary, complement).to_csv(sep='\t', index=False).rstrip('\n')

    lines = []
    for number, display in enumerate(fragments.for_display(primary, complement), start=1):
        lines.append(f"Fragment {number}: primary {display.p_left}-{display.p_right}, "
                     f"complement {display.c_left}-{display.c_right}")
        lines.append(f"  5' {display.primary} 3'")
        lines.append(f"  3' {display.complement} 5'")
    return '\n'.join(lines)


def format_display(sequence_range: SequenceRange, primary: str, complement: str,
                   config_manager: ConfigManager) -> List[str]:
    cc = CalculatedCuts(sequence_range.size, circular=sequence_range.circular)
    cc.add_cuts_from_cut_ranges(sequence_range.cut_ranges)
    cc.remove_incomplete_cuts()

    vc_symbol, hc_symbol = config_manager.get_display_symbols()
    return cc.strands_for_display(primary, complement, vc_symbol=vc_symbol, hc_symbol=hc_symbol)


@handle_exceptions
def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load configuration first so logging can pick up its settings
    config_manager = ConfigManager(args.config)

    log_level = max(logging.DEBUG, 30 - (args.verbose * 10))  # 0=WARNING, 1=INFO, 2=DEBUG

    logger = LoggingManager.configure(
        level=log_level,
        log_file=args.log_file,
        log_dir=args.log_dir,
        component="recut",
        config=config_manager.config
    )
    if args.command is None:
        parser.print_help()
        return 0

    primary, complement = load_strands(args)
    sequence_range = build_sequence_range(args, len(primary), config_manager)
    logger.info(f"Cutting {sequence_range!r}")

    if args.command == 'fragments':
        output_format = args.format or ('json' if args.json else config_manager.get('output.format', 'text'))
        print(format_fragments(sequence_range, primary, complement, output_format))

    elif args.command == 'display':
        rows = format_display(sequence_range, primary, complement, config_manager)
        if args.json:
            print(json.dumps({'primary': rows[0], 'between': rows[1], 'complement': rows[2]}, indent=2))
        else:
            print('\n'.join(rows))

    return 0


if __name__ == "__main__":
    sys.exit(main())
