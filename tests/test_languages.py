from dropgate.models.languages import (
    DEFAULT_REGISTRY, ExtensionRegistry, Language,
)


class TestExtensionRegistry:
    @staticmethod
    def test_known_extensions():
        lookup = DEFAULT_REGISTRY.get_language_for_extension
        assert lookup('.png').id == 'image'
        assert lookup('.svg').id == 'svg'
        assert lookup('.htm').id == 'html'
        assert lookup('.md').id == 'markdown'

    @staticmethod
    def test_lookup_normalizes_input():
        language = DEFAULT_REGISTRY.get_language_for_extension('CSS')
        assert language is not None
        assert language.id == 'css'

    @staticmethod
    def test_unknown_extensions():
        for ext in ('.xyz', '.zip', '.tar', '.ttf', '', '.'):
            assert DEFAULT_REGISTRY.get_language_for_extension(ext) is None

    @staticmethod
    def test_custom_languages():
        registry = ExtensionRegistry([Language('python', 'Python', ('py',))])
        assert registry.get_language_for_extension('.py').name == 'Python'
        assert registry.get_language_for_extension('.png') is None
