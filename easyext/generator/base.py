# -*- coding: utf-8 -*-
# Copyright© 1986-2018 Altair Engineering Inc.


class AbstractGenerator(object):
    """Abstract class for a generator"""

    def __init__(self, **kwargs):
        """kwargs passed to the generator"""
        self.options = kwargs

    def generate(self, bundle_metadata):
        """Generate the extended files of the bundle described by
        `bundle_metadata`.

        Existing files must never be overwritten.
        """
        raise NotImplementedError()
