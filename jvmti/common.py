"""
   Error handling routines
   Logging format
"""


logformat = "%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s"


class JvmtiError(Exception):
    """ Base class of all errors raised by this package. """

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def print(self, file=None):
        """ Print the error message """
        print(self.msg, file=file)


class MalformedSignature(JvmtiError):
    """ A type signature does not follow the signature grammar. """

    def __init__(self, signature, msg=None):
        if msg is None:
            msg = "Malformed type signature: {!r}".format(signature)
        super().__init__(msg)
        self.signature = signature
