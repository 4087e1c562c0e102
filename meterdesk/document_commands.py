# -*- coding: utf-8 -*-
"""
Document Commands Module
New / Open / Save / Save As on a QgsProject, with the message boxes shown
to the user when a command fails.
"""

import os

from PyQt5.QtWidgets import QFileDialog, QMessageBox

from .logging_config import get_logger

logger = get_logger('Document')

PROJECT_FILE_FILTER = "QGIS Projects (*.qgz *.qgs)"


def is_read_only(path):
    """Return True if ``path`` exists and cannot be written."""
    return os.path.exists(path) and not os.access(path, os.W_OK)


class DocumentCommands:
    """Document lifecycle commands of the main window."""

    def __init__(self, project=None, parent_widget=None):
        """
        Args:
            project: QgsProject - defaults to QgsProject.instance()
            parent_widget: QWidget for dialog parenting (optional)
        """
        if project is None:
            from qgis.core import QgsProject
            project = QgsProject.instance()
        self.project = project
        self.parent_widget = parent_widget

    @property
    def document_name(self):
        """Path of the open document, or '' when the map was never saved."""
        return self.project.fileName()

    @property
    def can_save(self):
        """Save needs a file name; a new document goes through Save As."""
        return bool(self.document_name)

    # ------------------------------------------------------------------ #
    #  Commands
    # ------------------------------------------------------------------ #

    def new_document(self):
        """Close the current document and start an empty map."""
        self.project.clear()
        logger.info("New document")
        return True

    def open_document(self, path=None):
        """Open a project file, asking for it when ``path`` is None.

        Returns:
            bool: True if a document was opened
        """
        if path is None:
            path, _ = QFileDialog.getOpenFileName(
                self.parent_widget, "Open Map Document", "", PROJECT_FILE_FILTER
            )
        if not path:
            return False

        if not self.project.read(path):
            logger.error(f"Could not open {path}: {self.project.error()}")
            QMessageBox.critical(
                self.parent_widget,
                "Open Error",
                f"Could not open map document:\n{path}\n\n{self.project.error()}"
            )
            return False

        logger.info(f"Opened {path}")
        return True

    def save_document(self):
        """Save to the current file; falls back to Save As for new documents.

        Returns:
            bool: True if the document was written
        """
        path = self.document_name
        if not path:
            return self.save_document_as()

        if is_read_only(path):
            QMessageBox.warning(self.parent_widget, "Save", "Map document is read only!")
            return False

        return self._write(path)

    def save_document_as(self, path=None):
        """Write the document to a new file, asking for it when ``path`` is None."""
        if path is None:
            path, _ = QFileDialog.getSaveFileName(
                self.parent_widget, "Save Map Document As", self.document_name,
                PROJECT_FILE_FILTER
            )
        if not path:
            return False

        if is_read_only(path):
            QMessageBox.warning(self.parent_widget, "Save As", "Map document is read only!")
            return False

        return self._write(path)

    def _write(self, path):
        if not self.project.write(path):
            logger.error(f"Could not save {path}: {self.project.error()}")
            QMessageBox.critical(
                self.parent_widget,
                "Save Error",
                f"Could not save map document:\n{path}\n\n{self.project.error()}"
            )
            return False

        logger.info(f"Saved {path}")
        return True
