from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMessageBox

from eventloopsim.io import history_csv_text, output_log_text, summary_json_text
from eventloopsim.metrics import format_summary_text, summarize_history

logger = logging.getLogger(__name__)


def on_save_log_clicked(window) -> None:
    state = window._controller.state()  # noqa: SLF001
    if not state.history and not state.output_log:
        QMessageBox.information(window, "Nothing to export", "Step the simulation first.")
        return

    path_str, _ = QFileDialog.getSaveFileName(
        window,
        "Export session log",
        "",
        "Zip files (*.zip);;All files (*)",
    )
    if not path_str:
        return

    out_path = Path(path_str)
    if out_path.suffix.lower() != ".zip":
        out_path = out_path.with_suffix(".zip")

    summary = summarize_history(state.history, state.output_log)
    try:
        export_session(out_path, state=state, summary=summary)
    except Exception as e:  # noqa: BLE001
        logger.exception("export to %s failed", out_path)
        QMessageBox.critical(window, "Export failed", f"Could not export log: {e}")
        return

    logger.info("exported session log to %s", out_path)


def export_session(out_path: Path, *, state, summary: dict) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(out_path, mode="w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("Summary.txt", f"{format_summary_text(summary).strip()}\n".encode("utf-8"))
        zf.writestr("History.csv", history_csv_text(state.history).encode("utf-8"))
        zf.writestr("Summary.json", summary_json_text(summary).encode("utf-8"))
        zf.writestr("Output.txt", output_log_text(state.output_log).encode("utf-8"))
