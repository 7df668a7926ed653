################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of stones
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from stones.compare import mat_isclose
from stones.compare import vec_isclose
from stones.config import DEFAULT_TOLERANCE
from stones.config import StonesConfigError
from stones.config import ToleranceConfig
from stones.matrix import Matrix2
from stones.matrix import Matrix2f
from stones.matrix import Matrix2i
from stones.matrix import Matrix3
from stones.matrix import Matrix3f
from stones.matrix import Matrix3i
from stones.matrix import Matrix4
from stones.matrix import Matrix4f
from stones.matrix import Matrix4i
from stones.matrix import as_matrix2
from stones.matrix import as_matrix3
from stones.matrix import as_matrix4
from stones.matrix import mat2_add
from stones.matrix import mat2_identity
from stones.matrix import mat2_mul
from stones.matrix import mat2_scale
from stones.matrix import mat2_sub
from stones.matrix import mat3_add
from stones.matrix import mat3_identity
from stones.matrix import mat3_mul
from stones.matrix import mat3_scale
from stones.matrix import mat3_sub
from stones.matrix import mat4_add
from stones.matrix import mat4_identity
from stones.matrix import mat4_mul
from stones.matrix import mat4_scale
from stones.matrix import mat4_sub
from stones.matrix import mat4_transform_vec
from stones.matrix import mat_get
from stones.number_traits import ScalarKind
from stones.number_traits import UnsupportedScalarError
from stones.number_traits import one
from stones.number_traits import one_like
from stones.number_traits import register_scalar_kind
from stones.number_traits import scalar_kind
from stones.number_traits import supported_scalar_types
from stones.number_traits import zero
from stones.number_traits import zero_like
from stones.vector import Vector2
from stones.vector import Vector2f
from stones.vector import Vector2i
from stones.vector import Vector3
from stones.vector import Vector3f
from stones.vector import Vector3i
from stones.vector import Vector4
from stones.vector import Vector4f
from stones.vector import Vector4i
from stones.vector import as_vector2
from stones.vector import as_vector3
from stones.vector import as_vector4
from stones.vector import vec2
from stones.vector import vec2_add
from stones.vector import vec2_dot
from stones.vector import vec2_mul
from stones.vector import vec2_sub
from stones.vector import vec3
from stones.vector import vec3_add
from stones.vector import vec3_cross
from stones.vector import vec3_dot
from stones.vector import vec3_mul
from stones.vector import vec3_sub
from stones.vector import vec4
from stones.vector import vec4_add
from stones.vector import vec4_dot
from stones.vector import vec4_mul
from stones.vector import vec4_sub


__all__ = [
    "DEFAULT_TOLERANCE",
    "Matrix2",
    "Matrix2f",
    "Matrix2i",
    "Matrix3",
    "Matrix3f",
    "Matrix3i",
    "Matrix4",
    "Matrix4f",
    "Matrix4i",
    "ScalarKind",
    "StonesConfigError",
    "ToleranceConfig",
    "UnsupportedScalarError",
    "Vector2",
    "Vector2f",
    "Vector2i",
    "Vector3",
    "Vector3f",
    "Vector3i",
    "Vector4",
    "Vector4f",
    "Vector4i",
    "as_matrix2",
    "as_matrix3",
    "as_matrix4",
    "as_vector2",
    "as_vector3",
    "as_vector4",
    "mat2_add",
    "mat2_identity",
    "mat2_mul",
    "mat2_scale",
    "mat2_sub",
    "mat3_add",
    "mat3_identity",
    "mat3_mul",
    "mat3_scale",
    "mat3_sub",
    "mat4_add",
    "mat4_identity",
    "mat4_mul",
    "mat4_scale",
    "mat4_sub",
    "mat4_transform_vec",
    "mat_get",
    "mat_isclose",
    "one",
    "one_like",
    "register_scalar_kind",
    "scalar_kind",
    "supported_scalar_types",
    "vec2",
    "vec2_add",
    "vec2_dot",
    "vec2_mul",
    "vec2_sub",
    "vec3",
    "vec3_add",
    "vec3_cross",
    "vec3_dot",
    "vec3_mul",
    "vec3_sub",
    "vec4",
    "vec4_add",
    "vec4_dot",
    "vec4_mul",
    "vec4_sub",
    "vec_isclose",
    "zero",
    "zero_like",
]
