"""Tests for arthur.builds."""

from __future__ import annotations

from arthur.builds import Build
from arthur.context import Context
from arthur.extension import Extension
from arthur.models import ResourceModel


class OptionRecorder(Extension):
    def __init__(self):
        self.seen_options: list[str] = []
        self.seen_property: str | None = None

    def execute(self, ctx: Context) -> None:
        self.seen_options = list(ctx.configuration.custom_options)
        self.seen_property = ctx.get_property("key")
        ctx.add_native_image_option("-Dfrom.extension=true")
        ctx.register(ResourceModel(pattern="app\\.properties"))


class TestBuild:
    def test_defaults(self):
        build = Build(name="app")
        assert build.extensions == []
        assert build.properties == {}
        assert build.options == []

    def test_run_seeds_options_before_extensions(self, tmp_path):
        ext = OptionRecorder()
        build = Build(
            name="app",
            working_directory=tmp_path,
            extensions=[ext],
            options=["-Da=1"],
            properties={"key": "value"},
        )
        config = build.run()
        assert ext.seen_options == ["-Da=1"]
        assert ext.seen_property == "value"
        assert config.custom_options == ["-Da=1", "-Dfrom.extension=true"]
        assert len(config.resources_configuration_files) == 1

    def test_run_does_not_mutate_properties(self, tmp_path):
        build = Build(name="app", working_directory=tmp_path, properties={"key": "value"})
        build.run()
        assert build.properties == {"key": "value"}
