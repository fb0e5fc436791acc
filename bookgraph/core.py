def create_graph(resolvers, dependencies=None):
    return define_graph(resolvers).create_graph(dependencies or {})


def define_graph(resolvers):
    return GraphDefinition(resolvers)


class GraphDefinition(object):
    def __init__(self, resolvers):
        self._resolvers = {}
        for resolver in _flatten(resolvers):
            if resolver.type in self._resolvers:
                raise GraphError("resolver already registered for type: {}".format(resolver.type))
            self._resolvers[resolver.type] = resolver

    def create_graph(self, dependencies):
        return Graph(self._resolvers, dependencies)


class Graph(object):
    def __init__(self, resolvers, dependencies):
        self._resolvers = resolvers
        self._injector = Injector(dependencies)

    def resolve(self, query):
        resolver = self._resolvers.get(query.type)
        if resolver is None:
            raise GraphError("could not find resolver for query of type: {}".format(query.type))
        else:
            return self._injector.call_with_dependencies(resolver, self, query)


class Injector(object):
    def __init__(self, dependencies):
        self._dependencies = dict(dependencies)
        self._dependencies[Injector] = self

    def get(self, key):
        try:
            return self._dependencies[key]
        except KeyError:
            raise GraphError("missing dependency: {!r}".format(key))

    def call_with_dependencies(self, func, *args, **kwargs):
        for arg_name, dependency_key in getattr(func, "dependencies", {}).items():
            kwargs[arg_name] = self.get(dependency_key)
        return func(*args, **kwargs)


def _flatten(value):
    if isinstance(value, (list, tuple)):
        for element in value:
            yield from _flatten(element)
    else:
        yield value


def resolver(type):
    def register_resolver(func):
        func.type = type
        return func

    return register_resolver


def dependencies(**kwargs):
    def register_dependencies(func):
        func.dependencies = kwargs
        return func

    return register_dependencies


class GraphError(Exception):
    pass
