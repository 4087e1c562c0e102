"""Tests for status bar text."""
from meterdesk.status_text import document_label, format_coordinates


def test_coordinates_use_precision_and_units():
    assert format_coordinates(36.81723, -1.28641, 2, 'degrees') == 'X: 36.82  Y: -1.29  degrees'


def test_coordinates_default_to_two_decimals():
    assert format_coordinates(250123.456, 9850000.004) == 'X: 250123.46  Y: 9850000.00'


def test_coordinates_without_units():
    assert format_coordinates(250000, 9850000.5, 1) == 'X: 250000.0  Y: 9850000.5'


def test_document_label():
    assert document_label('/data/maps/network.qgz') == 'network.qgz'
    assert document_label('') == ''
    assert document_label(None) == ''
