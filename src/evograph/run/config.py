import configparser
import os
from evograph.activations import get_squash

class Config:
    """
    Configuration parameters for building and training an evograph network.

    A Config is either created empty (all parameters at their documented
    defaults, convenient for testing and manual setup) or parsed from an INI file.

    The network counts and hyperparameters are exported alongside the genome
    (see 'to_dict'), so that a trained network can be rebuilt from the record.
    """

    # Serialized key => attribute name
    _DICT_KEYS = {
        "input"            : "num_inputs",
        "output"           : "num_outputs",
        "squash"           : "squash",
        "learning_rate"    : "learning_rate",
        "momentum"         : "momentum",
        "epochs"           : "epochs",
        "target_loss"      : "target_loss",
        "report_interval"  : "report_interval",
        "weight_init_mean" : "weight_init_mean",
        "weight_init_stdev": "weight_init_stdev",
        "bias_init_mean"   : "bias_init_mean",
        "bias_init_stdev"  : "bias_init_stdev",
        "seed"             : "seed",
    }

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with default values.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.num_inputs  = None
            self.num_outputs = None
            self.squash      = "sigmoid"

            self.learning_rate   = 0.001
            self.momentum        = 0.5
            self.epochs          = 1000
            self.target_loss     = 0.0
            self.report_interval = 100

            self.weight_init_mean  = 0.0
            self.weight_init_stdev = 1.0
            self.bias_init_mean    = 0.0
            self.bias_init_stdev   = 1.0
            self.seed              = None
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # The number of input nodes, through which the network receives inputs.
        # Only required when the network is generated rather than read from a genome.
        self.num_inputs = get_value('NETWORK', 'num_inputs', int, default=None)

        # The number of output nodes, to which the network delivers outputs.
        self.num_outputs = get_value('NETWORK', 'num_outputs', int, default=None)

        # The squash function given to the nodes of a generated genome.
        self.squash = get_value('NETWORK', 'squash', str, default="sigmoid")

        # [TRAINING]

        # The step size of each gradient descent update.
        self.learning_rate = get_value('TRAINING', 'learning_rate', float, default=0.001)

        # The fraction of the previous update added to the current one.
        # Use 0.0 for plain gradient descent.
        self.momentum = get_value('TRAINING', 'momentum', float, default=0.5)

        # The maximum number of passes over the training data.
        self.epochs = get_value('TRAINING', 'epochs', int, default=1000)

        # Training stops early once the mean squared error of an epoch
        # is at or below this value.
        self.target_loss = get_value('TRAINING', 'target_loss', float, default=0.0)

        # Report training progress every N epochs.
        self.report_interval = get_value('TRAINING', 'report_interval', int, default=100)

        # [INITIALIZATION]

        # The mean and standard deviation of the normal distributions used
        # to initialize the weights of generated connections.
        self.weight_init_mean  = get_value('INITIALIZATION', 'weight_init_mean' , float, default=0.0)
        self.weight_init_stdev = get_value('INITIALIZATION', 'weight_init_stdev', float, default=1.0)

        # The mean and standard deviation of the normal distributions used
        # to initialize the biases of generated nodes.
        self.bias_init_mean  = get_value('INITIALIZATION', 'bias_init_mean' , float, default=0.0)
        self.bias_init_stdev = get_value('INITIALIZATION', 'bias_init_stdev', float, default=1.0)

        # Seed of the random generator used to generate genomes.
        # Use "None" for a fresh, unpredictable seed.
        self.seed = get_value('INITIALIZATION', 'seed', int, default=None)

    def to_dict(self) -> dict:
        """
        Convert the configuration to its serialized (JSON-compatible) form.

        The network counts are stored under the keys 'input' and 'output'.
        """
        return {key: getattr(self, attr) for key, attr in self._DICT_KEYS.items()}

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'Config':
        """
        Create a Config from its serialized form.
        Keys absent from the dictionary keep their default values.

        Parameters:
            config_dict: dictionary as produced by 'to_dict'

        Raises:
            ValueError: if the dictionary holds an unknown key
        """
        unknown = set(config_dict) - set(cls._DICT_KEYS)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

        config = cls()
        for key, value in config_dict.items():
            setattr(config, cls._DICT_KEYS[key], value)
        return config

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate the squash name when set.
        Raises UnknownSquashError if the name is not registered.
        """
        if name == 'squash':
            get_squash(value)
        super().__setattr__(name, value)

    def __repr__(self):
        return f"Config({self.to_dict()})"
