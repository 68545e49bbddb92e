"""
ObjectFactory Exceptions

Custom exception hierarchy for ObjectFactory
"""


class ObjectFactoryError(Exception):
    """
    Base exception for all ObjectFactory errors.

    All ObjectFactory-specific exceptions inherit from this class.
    You can catch this to handle any ObjectFactory error generically.

    Example:
        >>> try:
        ...     obj = construct({'class': 'myapp.services.Mailer'})
        ... except ObjectFactoryError as e:
        ...     print(f"Construction failed: {e}")
    """

    pass


class InvalidSpecificationError(ObjectFactoryError, ValueError):
    """
    Raised when an object specification is malformed.

    This error is always raised before anything is constructed, so a
    caller never observes a partially built object.

    Common causes:
        - A specification without a ``class`` or ``factory`` key
        - Passing a bare class or callable without ``allow_class_name`` /
          ``allow_callable``
        - ``args`` given as a mapping with named keys
        - A ``class`` name that cannot be imported
        - ``services`` or ``optional_services`` without a service container

    Solution:
        Use a positional ``args`` list and name the target explicitly::

            construct({
                'class': 'myapp.services.Mailer',
                'args': ['smtp.example.org', 25],
            })
    """

    pass


class UnexpectedResultError(ObjectFactoryError, TypeError):
    """
    Raised when construction produced something other than what was expected.

    Common causes:
        - A ``factory`` returning ``None`` or a scalar value
        - A ``factory`` returning an instance of a different class than
          the ``class`` key names
        - The result failing the ``assert_class`` option

    Solution:
        Make the factory return an instance of the declared type::

            construct({
                'class': Mailer,
                'factory': lambda: SmtpMailer(),  # SmtpMailer subclasses Mailer
            })
    """

    pass


class ServiceNotFoundError(ObjectFactoryError, LookupError):
    """
    Raised when a service container is asked for a name it does not hold.

    Required ``services`` are not tolerant of missing names; list the
    service under ``optional_services`` to receive ``None`` instead.

    Note:
        The error message includes the registered service names
        to help identify typos.
    """

    pass
