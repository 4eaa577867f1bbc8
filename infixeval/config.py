import os

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'

# Settings for the command line. Defaults can be overridden from the environment,
# and command-line flags override both, through replace().
class Config:
    def __init__(self, prompt='>>> ', log_level='WARNING', filename='<stdin>'):
        self.prompt = prompt
        self.log_level = log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError('unknown log level %r, expected one of %s' %
                    (self.log_level, ', '.join(LOG_LEVELS)))
        # Label used for expressions read from stdin when reporting errors
        self.filename = filename

    # Return a copy with some fields changed, validated like a new Config
    def replace(self, **changes):
        fields = dict(prompt=self.prompt, log_level=self.log_level, filename=self.filename)
        fields.update(changes)
        return Config(**fields)

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        kwargs = {}
        if 'INFIXEVAL_PROMPT' in environ:
            kwargs['prompt'] = environ['INFIXEVAL_PROMPT']
        if environ.get('INFIXEVAL_LOG_LEVEL'):
            kwargs['log_level'] = environ['INFIXEVAL_LOG_LEVEL']
        return cls(**kwargs)

    def __repr__(self):
        return 'Config(prompt=%r, log_level=%r, filename=%r)' % (self.prompt, self.log_level, self.filename)
