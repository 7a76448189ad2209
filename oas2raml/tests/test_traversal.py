"""Tests for the scoped traversal engine."""

import pytest

from oas2raml.conversion.traversal import (
    Context,
    Copy,
    Descend,
    PathItemDefaults,
    Scope,
    Skip,
    Transform,
    join_path,
    visit,
)
from oas2raml.diagnostics import DiagnosticKind, DiagnosticSink, Severity


@pytest.fixture
def sink():
    return DiagnosticSink()


def make_context(scope, sink, path=''):
    return Context(path=path, scope=scope, sink=sink)


class TestJoinPath:
    def test_root_segment(self):
        assert join_path('', 'info') == 'info'

    def test_nested_segment(self):
        assert join_path('info', 'title') == 'info/title'

    def test_resource_path_keeps_its_slash(self):
        assert join_path('paths', '/pets') == 'paths//pets'


class TestScope:
    def test_fields_are_read_only(self):
        scope = Scope('test', {'title': Copy()})
        with pytest.raises(TypeError):
            scope.fields['other'] = Copy()

    def test_keys_follow_declaration_order(self):
        scope = Scope('test', {'b': Copy(), 'a': Skip()})
        assert scope.keys() == ('b', 'a')

    def test_lookup_unknown_key(self):
        scope = Scope('test', {'title': Copy()})
        assert scope.lookup('missing') is None

    def test_source_mapping_changes_do_not_leak(self):
        fields = {'title': Copy()}
        scope = Scope('test', fields)
        fields['extra'] = Copy()
        assert 'extra' not in scope.fields


class TestContext:
    def test_descend_builds_child_path(self, sink):
        root = Scope('root', {})
        child = Scope('child', {})
        context = make_context(root, sink, path='info')

        derived = context.descend('contact', child)

        assert derived.path == 'info/contact'
        assert derived.scope is child
        assert derived.sink is sink

    def test_descend_leaves_parent_untouched(self, sink):
        root = Scope('root', {})
        context = make_context(root, sink)
        parent = {}

        derived = context.descend('paths', Scope('child', {}), parent=parent)

        assert context.path == ''
        assert context.scope is root
        assert context.parent is None
        assert derived.parent is parent

    def test_defaults_are_shared_between_derived_contexts(self, sink):
        defaults = PathItemDefaults()
        context = Context(
            path='', scope=Scope('root', {}), sink=sink, defaults=defaults
        )

        derived = context.descend('get', Scope('child', {}))
        derived.defaults.summary = 'S'

        assert context.defaults.summary == 'S'


class TestVisit:
    def test_copy_handler(self, sink):
        scope = Scope('test', {'title': Copy()})
        output = {}

        visit({'title': 'Pets'}, output, make_context(scope, sink))

        assert output == {'title': 'Pets'}
        assert len(sink) == 0

    def test_copy_does_not_share_nodes_with_input(self, sink):
        scope = Scope('test', {'enum': Copy()})
        node = {'enum': ['v1', 'v2']}
        output = {}

        visit(node, output, make_context(scope, sink))
        node['enum'].append('v3')

        assert output == {'enum': ['v1', 'v2']}

    def test_unknown_key_is_reported(self, sink):
        scope = Scope('test', {'title': Copy()})
        output = {}

        visit({'components': {}}, output, make_context(scope, sink, path='info'))

        assert output == {}
        [diagnostic] = list(sink)
        assert diagnostic.kind is DiagnosticKind.UNSUPPORTED_FIELD
        assert diagnostic.severity is Severity.WARNING
        assert diagnostic.location == 'info/components'
        assert diagnostic.message == 'Skipping info/components: not supported'

    def test_unknown_key_at_root_has_no_leading_slash(self, sink):
        visit({'components': {}}, {}, make_context(Scope('root', {}), sink))

        [diagnostic] = list(sink)
        assert diagnostic.message == 'Skipping components: not supported'

    def test_skip_handler(self, sink):
        scope = Scope('test', {'contact': Skip()})
        output = {}

        visit({'contact': {'email': 'a@b.c'}}, output, make_context(scope, sink, 'info'))

        assert output == {}
        [diagnostic] = list(sink)
        assert diagnostic.kind is DiagnosticKind.UNSUPPORTED_BY_TARGET
        assert diagnostic.message == 'Skipping info/contact: not supported by RAML'

    def test_skip_with_custom_reason(self, sink):
        scope = Scope('test', {'x': Skip('no equivalent')})

        visit({'x': 1}, {}, make_context(scope, sink))

        assert [d.message for d in sink] == ['Skipping x: no equivalent']

    def test_descend_into_current_output(self, sink):
        inner = Scope('inner', {'title': Copy()})
        outer = Scope('outer', {'info': Descend(inner)})
        output = {}

        visit({'info': {'title': 'T', 'x': 1}}, output, make_context(outer, sink))

        assert output == {'title': 'T'}
        assert [d.location for d in sink] == ['info/x']

    def test_descend_into_target_node(self, sink):
        seen = []
        inner = Scope(
            'inner',
            {'a': Transform(lambda k, v, out, ctx: seen.append(ctx.parent))},
        )
        outer = Scope('outer', {'block': Descend(inner, target='nested')})
        output = {}

        visit({'block': {'a': 1}}, output, make_context(outer, sink))

        assert output == {'nested': {}}
        assert seen == [output]

    def test_transform_receives_key_value_output_and_context(self, sink):
        calls = []

        def record(key, value, output, context):
            calls.append((key, value, context.path))
            output['renamed'] = value

        scope = Scope('test', {'summary': Transform(record)})
        output = {}

        visit({'summary': 'S'}, output, make_context(scope, sink, 'paths//pets/get'))

        assert calls == [('summary', 'S', 'paths//pets/get')]
        assert output == {'renamed': 'S'}

    def test_keys_visited_in_input_order(self, sink):
        order = []
        scope = Scope(
            'test',
            {
                'a': Transform(lambda k, v, out, ctx: order.append(k)),
                'b': Transform(lambda k, v, out, ctx: order.append(k)),
            },
        )

        visit({'b': 1, 'x': 2, 'a': 3}, {}, make_context(scope, sink))

        assert order == ['b', 'a']
        assert [d.location for d in sink] == ['x']

    def test_one_diagnostic_per_unknown_key(self, sink):
        visit({'x': 1, 'y': 2, 'z': 3}, {}, make_context(Scope('empty', {}), sink))

        assert [d.location for d in sink] == ['x', 'y', 'z']

    def test_non_string_keys_are_located(self, sink):
        visit({200: 'ok'}, {}, make_context(Scope('empty', {}), sink, 'responses'))

        assert [d.location for d in sink] == ['responses/200']
