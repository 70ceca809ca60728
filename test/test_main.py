import main


def test_list_posts(content_dir, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("FLASK_ENV", raising=False)
    assert main.main(["--list", "--content", str(content_dir), "--config", str(tmp_path / "config.json")]) == 0
    out = capsys.readouterr().out
    assert out.index("] b - Post B") < out.index("] a - Post A")
    assert "2024-03-01" in out


def test_build(content_dir, tmp_path):
    output = tmp_path / "public"
    assert main.main(["--build", str(output), "--content", str(content_dir),
                      "--config", str(tmp_path / "config.json")]) == 0
    assert (output / "posts" / "a" / "index.html").is_file()


def test_missing_content_directory(tmp_path):
    assert main.main(["--list", "--content", str(tmp_path / "missing"),
                      "--config", str(tmp_path / "config.json")]) == 1
