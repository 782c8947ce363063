# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import inspect
import typing as tp


def different_from_defaults(
    *,
    instance: tp.Any,
    instance_dict: tp.Optional[tp.Dict[str, tp.Any]] = None,
) -> tp.Dict[str, tp.Any]:
    """Returns the keyword arguments of the instance initialization which differ from their default values

    Parameters
    ----------
    instance: object
        the object to inspect
    instance_dict: dict
        the arguments of the instance, if not provided it's self.__dict__

    Note
    ----
    This is convenient for short repr of configurations
    """
    defaults = {
        x: y.default
        for x, y in inspect.signature(instance.__class__.__init__).parameters.items()
        if x not in ["self", "__class__"]
    }
    if instance_dict is None:
        instance_dict = instance.__dict__
    return {x: y for x, y in instance_dict.items() if x in defaults and y != defaults[x]}
