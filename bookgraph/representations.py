class Object(object):
    def __init__(self, values):
        self._values = values
        for key in values:
            setattr(self, key, values[key])

    def __bool__(self):
        return bool(self._values)

    def __eq__(self, other):
        if isinstance(other, Object):
            return self._values == other._values
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    def __getitem__(self, key):
        return self._values[key]

    def __repr__(self):
        return "Object({!r})".format(self._values)


class FieldError(object):
    """
    Stands in for the value of a field whose resolver raised.

    The error is kept alongside the partially built result so that sibling
    fields still carry their values; callers decide how to report it.
    """

    def __init__(self, field_name, error):
        self.field_name = field_name
        self.error = error

    @property
    def message(self):
        return str(self.error)

    def __eq__(self, other):
        if isinstance(other, FieldError):
            return self.field_name == other.field_name and self.error is other.error
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    def __repr__(self):
        return "FieldError(field_name={!r}, error={!r})".format(self.field_name, self.error)
