import os
import logging
from importlib.resources import files

from configobj import ConfigObj, get_extra_values, flatten_errors, DuplicateError
from configobj.validate import Validator

LOG = logging.getLogger(__name__)


class SettingsError(Exception):
    pass


class Settings(object):
    """
    User settings, read from a ConfigObj file and validated against the
    bundled ``settings.spec``.

    Without an explicit ``path`` the file lives under ``~/.config/ip-masking``
    and is created from the bundled template on first use. If that file can't
    be written the bundled defaults are used and ``path`` is None.
    """
    def __init__(self, path=None):
        spec_lines = self.__resource_lines('settings.spec')
        if path is None:
            try:
                path = self.__ensure_config_setup()
            except OSError as e:
                LOG.warning('Using default settings: %s', e)
                self.__path = None
                self.__settings = self.__load_configobj({}, spec_lines, '<defaults>')
                return
        self.__path = path
        self.__settings = self.__load_configobj(path, spec_lines, path)
        LOG.debug('Loaded settings from %s', path)

    @property
    def path(self):
        return self.__path

    @property
    def color(self):
        return self.__settings['display']['color']

    def message(self, name, **params):
        return self.__settings['messages'][name].format(**params)

    @staticmethod
    def __resource_lines(name):
        return files('ipmasking').joinpath('resources').joinpath(name).read_text('utf-8').splitlines()

    @classmethod
    def __default_settings_root(cls):
        return os.path.expanduser('~/.config/ip-masking')

    @classmethod
    def __ensure_config_setup(cls):
        root = cls.__default_settings_root()
        if not os.path.exists(root):
            os.makedirs(root)

        settings_file = os.path.join(root, 'settings.conf')
        if not os.path.exists(settings_file):
            with open(settings_file, 'wt') as fh:
                fh.write('\n'.join(cls.__resource_lines('settings.conf')) + '\n')
            print("* Wrote: %s" % settings_file)
        return settings_file

    @classmethod
    def __load_configobj(cls, infile, spec_lines, config_file):
        try:
            confobj = ConfigObj(infile, configspec=spec_lines, raise_errors=True,
                                file_error=True, interpolation=False, encoding='utf-8')
        except DuplicateError as e:
            raise SettingsError('Bad config file "%s": %s' % (config_file, e))
        except IOError:
            raise SettingsError('Config file "%s" not found' % config_file)
        except Exception as e:
            raise SettingsError('Bad config file "%s": %s' % (config_file, e))

        bad_values = []
        bad_keys = []
        result = confobj.validate(Validator(), preserve_errors=True)
        if result is False:
            raise SettingsError('Unable to validate config file "%s"' % config_file)
        if result is not True:
            for sections, key, _ in flatten_errors(confobj, result):
                bad_values.append(sections + [key] if key is not None else sections)
        extra = get_extra_values(confobj)
        if extra:
            for path, key in extra:
                bad_keys.append(list(path) + [key])

        lines = []
        if bad_keys:
            lines.append('Unknown keys in config file "%s":' % config_file)
            for key in bad_keys:
                lines.append('  - /%s' % '/'.join(key))

        if bad_values:
            lines.append('Bad values in config file "%s":' % config_file)
            for key in bad_values:
                value = confobj
                try:
                    for k in key:
                        value = value[k]
                except KeyError:
                    value = '<missing>'
                lines.append('  - /%s = %s' % ('/'.join(key), value))

        if lines:
            raise SettingsError('\n'.join(lines))
        return confobj
