import operator


class Config(object):
    _frozen = False

    def __init__(self, descr, **overrides):
        self._descr = descr
        self._build(overrides)

    def _build(self, overrides):
        for child in self._descr._children:
            if isinstance(child, Option):
                self.__dict__[child._name] = child.default
            elif isinstance(child, OptionDescription):
                self.__dict__[child._name] = Config(child)
        for name, value in overrides.items():
            subconfig, name = self._get_by_path(name)
            setattr(subconfig, name, value)

    def __setattr__(self, name, value):
        if self._frozen:
            raise TypeError("trying to change a frozen option object")
        if name.startswith('_'):
            self.__dict__[name] = value
            return
        self.setoption(name, value)

    def setoption(self, name, value):
        if name not in self.__dict__:
            raise ValueError('unknown option %s' % (name,))
        child = getattr(self._descr, name)
        if isinstance(child, OptionDescription):
            raise ValueError('%s is an option group, not an option' % (name,))
        child.setoption(self, value)

    def _get_by_path(self, path):
        """returns tuple (config, name)"""
        path = path.split('.')
        for step in path[:-1]:
            self = getattr(self, step)
        return self, path[-1]

    def freeze(self):
        for child in self._descr._children:
            if isinstance(child, OptionDescription):
                getattr(self, child._name).freeze()
        self.__dict__['_frozen'] = True


class Option(object):
    def __init__(self, name, doc):
        self._name = name
        self.doc = doc

    def validate(self, value):
        raise NotImplementedError('abstract base class')

    def convert(self, value):
        return value

    def setoption(self, config, value):
        name = self._name
        try:
            value = self.convert(value)
        except (TypeError, ValueError):
            raise ValueError('invalid value %r for option %s' % (value, name))
        if not self.validate(value):
            raise ValueError('invalid value %r for option %s' % (value, name))
        config.__dict__[name] = value


class IntOption(Option):
    def __init__(self, name, doc, default=0, minimum=None):
        super(IntOption, self).__init__(name, doc)
        self.default = default
        self.minimum = minimum

    def convert(self, value):
        # strings must spell a decimal integer; everything else must
        # already be an integer
        if isinstance(value, str):
            return int(value, 10)
        if isinstance(value, bool):
            raise TypeError("bool is not an integer option value")
        return operator.index(value)

    def validate(self, value):
        return self.minimum is None or value >= self.minimum


class OptionDescription(object):
    def __init__(self, name, doc, children):
        self._name = name
        self.doc = doc
        self._children = children
        self._build()

    def _build(self):
        for child in self._children:
            setattr(self, child._name, child)
