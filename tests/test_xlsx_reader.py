"""Tests for xlsx_reader.py."""

import openpyxl
import pytest

from models import CrosswordError, WordEntry
from xlsx_reader import _validate_and_filter, read_words

HEADER = ("N", "Clue", "Word", "Difficulty")


def _write_workbook(path, rows, header=HEADER):
    wb = openpyxl.Workbook()
    ws = wb.active
    if header:
        ws.append(header)
    for row in rows:
        ws.append(row)
    wb.save(path)
    return path


class TestReadWords:
    def test_valid_parse(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [
            (1, "Onde se mora", "Casa", "Easy"),
            (2, "Astro rei", "Sol", None),
        ])
        words = read_words(path)
        assert words == [
            WordEntry(answer="CASA", display="Casa", clue_text="Onde se mora", difficulty="easy"),
            WordEntry(answer="SOL", display="Sol", clue_text="Astro rei", difficulty=None),
        ]

    def test_without_header(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [
            (1, "Onde se mora", "Casa"),
            (2, "Astro rei", "Sol"),
        ], header=None)
        assert [w.answer for w in read_words(path)] == ["CASA", "SOL"]

    def test_keeps_workbook_order(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [
            (3, "c", "Mar"),
            (1, "a", "Peixe"),
            (2, "b", "Lua"),
        ])
        assert [w.answer for w in read_words(path)] == ["MAR", "PEIXE", "LUA"]

    def test_answers_are_normalized(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [
            (1, "Sentimento", "Coração"),
            (2, "Objeto", "guarda-chuva"),
        ])
        words = read_words(path)
        assert [w.answer for w in words] == ["CORACAO", "GUARDACHUVA"]
        assert words[1].display == "guarda-chuva"

    def test_skips_non_data_rows(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [
            (1, "Astro rei", "Sol"),
            ("Notes", "ignored", "Nada"),
            (2, "Sem letras", "123"),
            (None, None, None),
            (3, "Satelite", "Lua"),
        ])
        assert [w.answer for w in read_words(path)] == ["SOL", "LUA"]

    def test_too_long_for_grid(self, tmp_path, capsys):
        path = _write_workbook(tmp_path / "words.xlsx", [
            (1, "long", "Paralelepipedo"),
            (2, "short", "Sol"),
        ])
        assert [w.answer for w in read_words(path, grid_size=10)] == ["SOL"]
        assert "too long" in capsys.readouterr().err
        assert len(read_words(path)) == 2

    def test_file_not_found(self, tmp_path):
        with pytest.raises(CrosswordError, match="File not found"):
            read_words(tmp_path / "nonexistent.xlsx")

    def test_empty_file_error(self, tmp_path):
        path = _write_workbook(tmp_path / "empty.xlsx", [])
        with pytest.raises(CrosswordError):
            read_words(path)


class TestValidateAndFilter:
    def test_short_filter(self, capsys):
        entries = [WordEntry.create("Eu", "short"), WordEntry.create("Gato", "ok")]
        result = _validate_and_filter(entries, grid_size=15)
        assert [e.answer for e in result] == ["GATO"]
        assert "too short" in capsys.readouterr().err

    def test_dedup_on_normalized_text(self, capsys):
        entries = [
            WordEntry.create("Avó", "first"),
            WordEntry.create("avo", "second"),
        ]
        result = _validate_and_filter(entries, grid_size=None)
        assert len(result) == 1
        assert result[0].clue_text == "first"
        assert "duplicate" in capsys.readouterr().err

    def test_empty_after_filter(self):
        with pytest.raises(CrosswordError, match="No valid word entries"):
            _validate_and_filter([WordEntry.create("Eu", "short")], grid_size=15)
