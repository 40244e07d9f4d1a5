"""
The refactoring pass: discover, collect, name, emit, rewrite.

Stages run strictly one after another. Naming cannot start before every
file has been collected, since uniqueness and the Safe-over-Manual
priority are decided over the whole run.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from stringlift.emitter import write_constants
from stringlift.exceptions import EmptyInputError
from stringlift.extraction import collect_literals
from stringlift.logging_config import logger
from stringlift.mutation import CodeEditor, ImportManager, constants_module, rewrite_source
from stringlift.naming import NameSynthesizer, NamingContext, SymbolTable, build_symbol_table
from stringlift.parser import parse_source
from stringlift.scanner import discover_files
from stringlift.schemas import FileLiterals, RefactorResult
from stringlift.settings import RefactorSettings, validate_settings

PathLike = Union[str, Path]


def collect_file(
    file_path: Path,
    settings: RefactorSettings,
    editor: CodeEditor,
    source: Optional[str] = None,
) -> FileLiterals:
    """Parse and classify the literals of one file, reading it unless given."""
    if source is None:
        source = editor.read_source(file_path)
    tree = parse_source(source, file_path)
    return collect_literals(
        tree,
        str(file_path),
        ignored_functions=settings.ignored_functions,
        ignored_constructors=settings.ignored_constructors,
        import_functions=settings.import_functions,
    )


def rewrite_file(
    file_path: Path,
    table: SymbolTable,
    constants_file: Path,
    settings: RefactorSettings,
    editor: CodeEditor,
    dry_run: bool = False,
) -> Tuple[int, bool]:
    """
    Rewrite one file in memory and save it if anything changed.

    Literal spans and protected ranges are recomputed from the fresh
    content so they match the bytes being rewritten.

    Returns:
        (number of literals replaced, whether the content changed)
    """
    source = editor.read_source(file_path)
    collected = collect_file(file_path, settings, editor, source)

    rewritten, count = rewrite_source(source, table.replacements(), collected)

    if settings.inject_import == "always" or count:
        module = constants_module(constants_file, file_path)
        rewritten = ImportManager().ensure_import(rewritten, module)

    changed = rewritten != source
    if changed and not dry_run:
        editor.write_source(file_path, rewritten)
        logger.debug(f"Rewrote {file_path} ({count} replacements)")

    return count, changed


def refactor_strings(
    input_path: PathLike,
    output_const_file: PathLike,
    output_source_file: Optional[PathLike] = None,
    settings: Optional[RefactorSettings] = None,
    dry_run: bool = False,
) -> RefactorResult:
    """
    Lift string literals under ``input_path`` into a constants module.

    Args:
        input_path: A source file or a directory scanned recursively
        output_const_file: Where the generated constants module is written
        output_source_file: Reserved; accepted and ignored
        settings: Run settings (defaults if omitted)
        dry_run: Collect and name everything but write no file

    Returns:
        RefactorResult summarizing the run

    Raises:
        EmptyInputError: If no source file was found (nothing is written)
        ConfigError: If the settings are invalid
        OSError: If a file cannot be read or written; files rewritten
            before the failure stay rewritten
    """
    settings = settings or RefactorSettings()
    validate_settings(settings)

    root = Path(input_path)
    constants_file = Path(output_const_file)
    if output_source_file is not None:
        logger.debug(f"Reserved path argument '{output_source_file}' is not used")

    files = discover_files(
        root,
        extensions=settings.extensions,
        respect_gitignore=settings.respect_gitignore,
        ignore_patterns=settings.ignore_patterns,
        exclude=[constants_file],
    )
    if not files:
        raise EmptyInputError(str(root))

    editor = CodeEditor()
    synthesizer = NameSynthesizer(prefix=settings.prefix, max_length=settings.max_length)

    collected: List[FileLiterals] = []
    for file_path in files:
        file_literals = collect_file(file_path, settings, editor)
        if file_literals.has_errors:
            logger.warning(f"{file_path} has syntax errors; literals were collected best-effort")
        collected.append(file_literals)

    table = build_symbol_table(collected, synthesizer, NamingContext())

    if not dry_run:
        write_constants(table, constants_file, editor)

    total = 0
    modified: List[str] = []
    for file_path in files:
        count, changed = rewrite_file(file_path, table, constants_file, settings, editor, dry_run=dry_run)
        total += count
        if changed:
            modified.append(str(file_path))

    logger.info(f"Processed {len(files)} files, {total} literals replaced")

    return RefactorResult(
        files=[str(f) for f in files],
        output_const_file=str(constants_file),
        safe_count=len(table.safe_bindings()),
        manual_count=len(table.manual_bindings()),
        replacements=total,
        modified_files=modified,
        dry_run=dry_run,
    )
