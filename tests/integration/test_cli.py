"""Tests for the vocab-builder command line interface."""

import importlib
import json
import sys

import pytest

from vocab_builder.cli import build_parser, generate_command, guess_mime_type, main


@pytest.mark.parametrize("path,expected", [
    ("ldp.ttl", "text/turtle"),
    ("vocab.n3", "text/n3"),
    ("foaf.rdf", "application/rdf+xml"),
    ("schema.owl", "application/rdf+xml"),
    ("noext", "application/rdf+xml"),
])
def test_guess_mime_type(path, expected):
    assert guess_mime_type(path) == expected


class TestGenerate:
    """Test the generate subcommand."""

    def test_generate_to_output(self, thing_ttl, tmp_test_dir, capsys):
        out = tmp_test_dir / "gen.py"
        assert main(["generate", str(thing_ttl), "--output", str(out)]) == 0
        assert out.exists()
        assert f"*** file created: '{out}' ***" in capsys.readouterr().out

    def test_default_output_name(self, thing_ttl, tmp_test_dir):
        assert main(["generate", str(thing_ttl), "--output-dir", str(tmp_test_dir)]) == 0
        assert (tmp_test_dir / "test.py").exists()

    def test_default_output_name_is_importable(self, thing_ttl, write_vocab, tmp_test_dir, monkeypatch):
        """A dotted source name still gives a module that can be imported."""
        source = write_vocab("foaf.v1.ttl", thing_ttl.read_text())
        out_dir = tmp_test_dir / "out"
        out_dir.mkdir()
        assert main(["generate", str(source), "--output-dir", str(out_dir)]) == 0
        assert [p.name for p in out_dir.iterdir()] == ["foaf_v1.py"]

        monkeypatch.syspath_prepend(str(out_dir))
        try:
            module = importlib.import_module("foaf_v1")
        finally:
            sys.modules.pop("foaf_v1", None)
        assert str(module.Thing) == "http://example.org/ns#Thing"

    def test_default_java_name_is_class_name(self, thing_ttl, write_vocab, tmp_test_dir):
        source = write_vocab("foaf.v1.ttl", thing_ttl.read_text())
        out_dir = tmp_test_dir / "out"
        out_dir.mkdir()
        assert main(["generate", str(source), "--output-dir", str(out_dir), "--target", "java"]) == 0
        assert "public class Foaf_v1 {" in (out_dir / "Foaf_v1.java").read_text()

        assert (tmp_test_dir / "test.py").exists()

    def test_java_target(self, thing_ttl, tmp_test_dir):
        assert main([
            "generate", str(thing_ttl),
            "--output-dir", str(tmp_test_dir),
            "--target", "java",
            "--package", "org.example",
        ]) == 0
        text = (tmp_test_dir / "Test.java").read_text()
        assert text.startswith("package org.example;")

    def test_flags_override_inferred(self, thing_ttl, tmp_test_dir):
        out = tmp_test_dir / "gen.py"
        main([
            "generate", str(thing_ttl), "-o", str(out),
            "--name", "Things", "--prefix", "http://example.org/",
        ])
        text = out.read_text()
        assert 'NAMESPACE = "http://example.org/"' in text
        assert 'PREFIX = "things"' in text
        # '#' is dropped from keys but kept in the bound URI
        assert 'nsThing = _NS.term("ns#Thing")' in text

    def test_missing_prefix_fails(self, no_ontology_ttl, tmp_test_dir, capsys):
        out = tmp_test_dir / "plain.py"
        assert main(["generate", str(no_ontology_ttl), "-o", str(out)]) == 1
        assert "could not detect prefix" in capsys.readouterr().out
        assert not out.exists()

    def test_missing_file_fails(self, tmp_test_dir, capsys):
        assert main(["generate", str(tmp_test_dir / "missing.ttl")]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_no_file_fails(self, capsys):
        assert main(["generate"]) == 1
        assert "no vocabulary file given" in capsys.readouterr().out

    def test_parse_error_fails(self, write_vocab, capsys):
        path = write_vocab("broken.ttl", "not turtle at all")
        assert main(["generate", str(path)]) == 1
        assert "broken.ttl" in capsys.readouterr().out

    def test_config_file(self, thing_ttl, write_vocab, tmp_test_dir):
        config = write_vocab("vocab.yaml", f"""\
source: {thing_ttl.name}
name: FromConfig
package: org.config
output: out/config_vocab.py
log: run.jsonl
""")
        (tmp_test_dir / "out").mkdir()
        assert main(["generate", "--config", str(config)]) == 0
        text = (tmp_test_dir / "out" / "config_vocab.py").read_text()
        assert 'PREFIX = "fromconfig"' in text
        assert "Package: org.config" in text

        events = [json.loads(l) for l in (tmp_test_dir / "run.jsonl").read_text().splitlines()]
        assert events[-2]["event"] == "file_written"

    def test_flags_beat_config(self, thing_ttl, write_vocab, tmp_test_dir):
        config = write_vocab("vocab.yaml", f"source: {thing_ttl.name}\nname: FromConfig\n")
        out = tmp_test_dir / "flag.py"
        assert main(["generate", "-c", str(config), "--name", "FromFlag", "-o", str(out)]) == 0
        assert 'PREFIX = "fromflag"' in out.read_text()

    def test_failure_logged(self, no_ontology_ttl, tmp_test_dir):
        log_path = tmp_test_dir / "run.jsonl"
        main(["generate", str(no_ontology_ttl), "-o", str(tmp_test_dir / "x.py"), "--log", str(log_path)])
        events = [json.loads(l) for l in log_path.read_text().splitlines()]
        assert events[-2]["event"] == "generation_failed"
        assert events[-2]["error_type"] == "GenerationError"


class TestInteractive:
    """Test prompting for overrides."""

    def _run(self, argv, answers):
        args = build_parser().parse_args(argv)
        replies = iter(answers)
        prompts = []

        def fake_input(text):
            prompts.append(text)
            return next(replies)

        return generate_command(args, input_fn=fake_input), prompts

    def test_defaults_shown_and_kept(self, thing_ttl, tmp_test_dir):
        code, prompts = self._run(
            ["generate", str(thing_ttl), "--interactive"],
            ["", "", "", str(tmp_test_dir)],
        )
        assert code == 0
        assert prompts[0] == "insert url-prefix [http://example.org/ns#] : "
        assert prompts[1] == "insert class name [Test] : "
        assert prompts[2] == "insert package name [] : "
        assert (tmp_test_dir / "test.py").exists()

    def test_answers_override(self, thing_ttl, tmp_test_dir):
        code, _ = self._run(
            ["generate", str(thing_ttl), "-i"],
            ["", "MyVocab", "org.example", str(tmp_test_dir)],
        )
        assert code == 0
        text = (tmp_test_dir / "myvocab.py").read_text()
        assert 'PREFIX = "myvocab"' in text
        assert "Package: org.example" in text


class TestInspect:
    """Test the inspect subcommand."""

    def test_lists_terms(self, fruit_ttl, capsys):
        assert main(["inspect", str(fruit_ttl)]) == 0
        out = capsys.readouterr().out
        assert "Prefix: http://example.org/ns#" in out
        assert "Name: Fruit" in out
        assert "Terms: 5" in out
        assert "has_value  <http://example.org/ns#has-value>" in out
        assert "A fruit that grows on trees." in out
        assert out.index("apple") < out.index("Banana") < out.index("cherry")

    def test_writes_nothing(self, fruit_ttl, tmp_test_dir):
        before = sorted(p.name for p in tmp_test_dir.iterdir())
        main(["inspect", str(fruit_ttl)])
        assert sorted(p.name for p in tmp_test_dir.iterdir()) == before

    def test_no_prefix(self, no_ontology_ttl, capsys):
        assert main(["inspect", str(no_ontology_ttl)]) == 1
        assert "Error:" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
