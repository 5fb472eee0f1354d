"""Configurable defaults for pixcolor.

Parameters are declared where they are used, with

 config.default("bins", 256, "Number of color levels used by colorize_scaled")

and read back with config.get. The usual pattern for a function argument
whose default should be configurable is

 def colorize_scaled(data, bins=None):
   bins = config.get("bins", bins)

so that an explicit argument always wins, and the configured value is only
used when the argument is None. Configured values come, in increasing order
of priority, from the declaration, from a configuration file, and from
config.set or command line options.

The configuration file is a plain "name = value" file with # comments,
read with config.init(name="pixcolor"), which looks in $PIXCOLORRC and
then ~/.pixcolorrc, or with config.load(fname). config.save writes the
current values, including the parameter descriptions as comments.

config.ArgumentParser is a drop-in replacement for argparse.ArgumentParser
which reads the configuration file and exposes every declared parameter as
a --name option. Those options are consumed before the parsed arguments are
returned."""

import argparse, os, textwrap, ast

# Declaration order is kept so that saved files group related parameters
parameters = {}

# priorities
#  0: declarations and configuration files
#  1: config.set and command line options

class ArgumentParser(argparse.ArgumentParser):
	def __init__(self, name=None, fname=None, must_exist=False, **kwargs):
		"""Like argparse.ArgumentParser, but reads the configuration file given
		by name or fname (see init) and adds a long option for each
		configuration parameter."""
		argparse.ArgumentParser.__init__(self, **kwargs)
		init(name=name, fname=fname, must_exist=must_exist)
		for pname in parameters:
			typ = type(parameters[pname]["value"])
			self.add_argument("--"+pname.replace("_","-"), dest=pname, type=str if typ is bool else typ,
				help=parameters[pname]["desc"])
	def parse_args(self, argv=None, namespace=None):
		args = argparse.ArgumentParser.parse_args(self, argv, namespace)
		for pname in parameters:
			if pname in args:
				val = getattr(args, pname)
				if val is not None:
					typ = type(parameters[pname]["value"])
					set(pname, val=="True" if typ is bool else val)
				delattr(args, pname)
		return args

def init(name=None, fname=None, must_exist=False):
	"""Load settings from a configuration file.

	If fname is given, it is read directly. Otherwise, if name is given, the
	file is taken from the environment variable NAMERC (upper case) if set,
	and from $HOME/.namerc otherwise. A missing file is only an error when
	must_exist is True. With neither argument nothing is loaded."""
	if fname is None:
		if name is None: return
		envname = name.upper()+"RC"
		if envname in os.environ:
			fname = os.environ[envname]
		else:
			fname = os.path.expandvars("$HOME/.%src" % name)
	try:
		load(fname)
	except FileNotFoundError:
		if must_exist: raise

def to_str():
	"""Format the configuration in the format understood by from_str."""
	res = ""
	for name in parameters:
		desc = parameters[name]["desc"] or ""
		res += "".join(["# " + line + "\n" for line in textwrap.wrap(desc)])
		res += "%s = %s\n\n" % (name, repr(parameters[name]["value"]))
	return res

def from_str(string):
	"""Update the configuration from "name = value" lines. Values may be
	integers, floats, booleans or quoted strings. Comment lines start with #
	and describe the parameter that follows them."""
	comment = []
	for line in string.split("\n"):
		line = line.strip()
		if len(line) == 0 or line[0] == "#":
			if len(line) > 0: comment.append(line[1:].strip())
			continue
		toks = line.split("=")
		if len(toks) != 2:
			raise ValueError("Invalid format in config: '%s'" % line)
		name, value = toks[0].strip(), toks[1].strip()
		try:
			ptype = type(parameters[name]["value"])
		except KeyError:
			ptype = type(ast.literal_eval(value))
		if ptype is bool:
			value = value == "True"
		elif ptype in [int,float]:
			value = ptype(value)
		elif ptype is str:
			if len(value) < 2 or value[0] != value[-1] or value[0] not in "'\"":
				raise ValueError("Invalid string in config: '%s'" % line)
			value = value[1:-1]
		else:
			raise ValueError("Unsupported config type '%s'" % ptype.__name__)
		set(name, value, " ".join(comment) or None, priority=0)
		comment = []

def save(config_file):
	"""Write the current configuration to config_file."""
	with open(config_file,"w") as f:
		f.write(to_str())

def load(config_file):
	"""Read configuration values from config_file."""
	with open(config_file,"r") as f:
		from_str(f.read())

def set(name, value, desc=None, priority=1):
	if name in parameters and parameters[name]["priority"] > priority: return
	if name in parameters and desc is None: desc = parameters[name]["desc"]
	parameters[name] = {"value": value, "priority": priority, "desc": desc}

def default(name, value, desc=None):
	"""Declare a configuration parameter with its default value and a
	description. Declaring an already configured parameter keeps the
	configured value."""
	if name in parameters:
		if desc is not None: parameters[name]["desc"] = desc
		return
	set(name, value, desc, priority=0)

def get(name, override=None):
	"""Return the value of the named parameter, or override if it is not None."""
	if override is not None: return override
	try:
		return parameters[name]["value"]
	except KeyError:
		raise KeyError("Undeclared configuration parameter '%s'" % name)

class override:
	"""Temporarily set a parameter inside a with block."""
	def __init__(self, name, value):
		self.name  = name
		self.value = value
	def __enter__(self):
		self.old = parameters.get(self.name)
		set(self.name, self.value, priority=1)
		return self
	def __exit__(self, type, value, traceback):
		if self.old is None: del parameters[self.name]
		else: parameters[self.name] = self.old
