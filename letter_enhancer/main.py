import asyncio
import sys
from pathlib import Path

from letter_enhancer.config.settings import Settings
from letter_enhancer.domain.models import UploadedFile
from letter_enhancer.logging.logger import Log
from letter_enhancer.session.enhancement_session import EnhancementSession
from letter_enhancer.session.factory import build_session
from letter_enhancer.session.presenter import ConsolePresenter

ENHANCED_FILENAME = "enhanced-motivation-letter.txt"


async def run(session: EnhancementSession, settings: Settings, argv: list[str]) -> int:
    """Load the letter from a file argument or stdin, then analyze it."""
    if argv:
        try:
            file = UploadedFile.from_path(Path(argv[0]))
        except OSError as exc:
            Log.error(f"Cannot open {argv[0]}: {exc}")
            return 2
        result = await session.on_file_selected(file)
        if result is None or not result.ok:
            return 1
    else:
        session.on_paste(sys.stdin.read())

    outcome = await session.on_analyze_requested()
    if not outcome.ok:
        return 1
    if settings.enable_download_feature:
        session.export_enhanced(Path.cwd() / ENHANCED_FILENAME)
    return 0


def main() -> None:
    """Entry point: settings -> logging -> session -> one analysis."""
    settings = Settings()
    Log.configure(settings.log_level)
    session = build_session(settings, ConsolePresenter())
    session.check_configuration()
    sys.exit(asyncio.run(run(session, settings, sys.argv[1:])))


if __name__ == "__main__":
    main()
