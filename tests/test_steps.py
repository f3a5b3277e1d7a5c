"""
Unit tests for step lists and HtmlParser.parse_all().

Tests cover:
- Declaration-time validation (ConfigurationError, UnknownStepError)
- Step order and the later-step-wins merge on key collisions
- Dispatch over private steps and the shared descriptor table
"""
import pytest

from src.encounter.errors import ConfigurationError, UnknownStepError
from src.encounter.parser.descriptors import CoercionKind, DescriptorTable, FieldDescriptor
from src.encounter.parser.html import HtmlParser
from src.encounter.parser.steps import StepList


class Collision(HtmlParser):
    parser_steps = StepList('step_a', 'step_b')

    def step_a(self, document):
        return {'x': 1, 'a': True}

    def step_b(self, document):
        return {'x': 2, 'b': True}


class Team(HtmlParser):
    parser_fields = DescriptorTable(
        FieldDescriptor('#lnkTeamName', 'name'),
        FieldDescriptor('#lblPoints', 'points', kind=CoercionKind.FLOAT),
    )
    parser_steps = ['parse_attributes', '_parse_captain']

    def _parse_captain(self, document):
        return {'captain': self.parse_url_object(document.select_one('#lnkCaptain'))}


class TestStepList:
    """Test StepList declaration."""

    def test_names_keep_order(self):
        assert StepList('b', 'a', '_c').names == ('b', 'a', '_c')

    def test_empty_list_is_allowed(self):
        assert len(StepList()) == 0

    @pytest.mark.parametrize("name", [1, None, b'step', 'not a name', ''])
    def test_non_identifier_raises(self, name):
        with pytest.raises(ConfigurationError):
            StepList('step_a', name)

    def test_duplicate_raises(self):
        with pytest.raises(ConfigurationError):
            StepList('step_a', 'step_a')

    @pytest.mark.parametrize("declared", ['step_a', {'step_a'}, 42, {'step_a': 1}])
    def test_from_declaration_rejects_non_sequences(self, declared):
        """A bare string, a set, a number or a mapping is not a step list."""
        with pytest.raises(ConfigurationError):
            StepList.from_declaration(declared)

    def test_from_declaration_accepts_list_and_tuple(self):
        assert StepList.from_declaration(['a', 'b']) == StepList('a', 'b')
        assert StepList.from_declaration(('a', 'b')) == StepList('a', 'b')

    def test_is_immutable(self):
        steps = StepList('a')
        with pytest.raises(AttributeError):
            steps._names = ('b',)

    def test_resolve_unknown_step_raises(self):
        with pytest.raises(UnknownStepError) as exc_info:
            StepList('step_a', 'missing').resolve(Collision)
        assert exc_info.value.step == 'missing'
        assert 'missing' in str(exc_info.value)

    def test_run_on_object_without_step_raises(self, make_soup):
        """Dispatch against an arbitrary owner fails on the first unknown step."""
        with pytest.raises(UnknownStepError):
            StepList('missing').run(object(), make_soup(''))


class TestParseAll:
    """Test HtmlParser.parse_all()."""

    def test_later_step_wins_on_collision(self, make_soup):
        """Keys produced by a later step overwrite earlier values."""
        assert Collision().parse_all(make_soup('')) == {'x': 2, 'a': True, 'b': True}

    def test_reversed_order_reverses_winner(self, make_soup):
        class Reversed(Collision):
            parser_steps = StepList('step_b', 'step_a')

        assert Reversed().parse_all(make_soup(''))['x'] == 1

    def test_steps_run_in_declaration_order(self, make_soup):
        calls = []

        class Ordered(HtmlParser):
            parser_steps = StepList('_first', 'second', '_third')

            def _first(self, document):
                calls.append('first')
                return {}

            def second(self, document):
                calls.append('second')
                return {}

            def _third(self, document):
                calls.append('third')
                return {}

        Ordered().parse_all(make_soup(''))
        assert calls == ['first', 'second', 'third']

    def test_no_steps_returns_empty_record(self, make_soup):
        class Plain(HtmlParser):
            pass

        assert Plain().parse_all(make_soup('<p>x</p>')) == {}

    def test_no_fields_returns_empty_attributes(self, make_soup):
        class Plain(HtmlParser):
            parser_steps = StepList('parse_attributes')

        assert Plain().parse_all(make_soup('<p>x</p>')) == {}

    def test_attributes_and_private_step_are_merged(self, team_page):
        record = Team().parse_all(team_page)
        assert record['name'] == 'TeamX'
        assert record['points'] == 1000.5
        assert record['captain'].id == 39999
        assert record['captain'].name == 'Marks'

    def test_list_declaration_is_frozen(self):
        assert isinstance(Team.parser_steps, StepList)

    def test_subclass_inherits_steps(self, make_soup):
        class Child(Collision):
            pass

        assert Child().parse_all(make_soup('')) == {'x': 2, 'a': True, 'b': True}

    def test_step_shadowed_on_instance_raises(self, make_soup):
        """A step replaced by a non-callable at runtime fails at dispatch."""
        entity = Collision()
        entity.step_b = None
        with pytest.raises(UnknownStepError):
            entity.parse_all(make_soup(''))


class TestDeclaration:
    """Test validation performed when an entity class is defined."""

    def test_unknown_step_fails_at_class_definition(self):
        with pytest.raises(UnknownStepError):
            class Broken(HtmlParser):
                parser_steps = StepList('parse_attributes', '_parse_nothing')

    def test_non_identifier_step_fails_at_class_definition(self):
        with pytest.raises(ConfigurationError):
            class Broken(HtmlParser):
                parser_steps = ['parse_attributes', 7]

    def test_string_step_list_fails_at_class_definition(self):
        with pytest.raises(ConfigurationError):
            class Broken(HtmlParser):
                parser_steps = 'parse_attributes'

    def test_non_table_fields_fail_at_class_definition(self):
        with pytest.raises(ConfigurationError):
            class Broken(HtmlParser):
                parser_fields = [FieldDescriptor('#a', 'a')]

    def test_double_underscore_step_is_not_resolved(self):
        """Name-mangled methods are not reachable by their declared name."""
        with pytest.raises(UnknownStepError):
            class Broken(HtmlParser):
                parser_steps = StepList('__parse_hidden')

                def __parse_hidden(self, document):
                    return {}

    def test_non_callable_attribute_is_not_a_step(self):
        with pytest.raises(UnknownStepError):
            class Broken(HtmlParser):
                parser_steps = StepList('label')
                label = 'not callable'
