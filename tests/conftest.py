"""
Pytest configuration and shared fixtures for parser tests.

This module contains shader sources shared across multiple test modules.
"""

import textwrap

import pytest

from shaderio.parser.blocks import BlockTable


@pytest.fixture
def table():
    """Fixture providing an empty block table."""
    return BlockTable()


@pytest.fixture
def vertex_shader():
    """Fixture providing a vertex shader with a mix of interface variables."""
    return textwrap.dedent(
        """
        #version 300 es

        in vec4 a_position;
        in vec4 a_color;

        uniform mat4 u_matrix;

        out vec4 v_color;

        void main() {
          gl_Position = u_matrix * a_position;

          v_color = a_color;
        }
        """
    )


@pytest.fixture
def struct_shader():
    """Fixture providing a shader using structs inside uniform blocks."""
    return textwrap.dedent(
        """
        #version 300 es

        precision highp float;
        struct Material
        {
            vec3 ambient;
            vec3 diffuse;
            vec3 specular;
            float shininess;
        };

        uniform PerScene
        {
            Material material;
        } u_perScene;

        struct MaterialAlternative{
        	float shininess;
        	float specularReflection;
        	float diffuseReflection;
        	float opacity;
        };

        layout(std140) uniform MaterialBuffer{
          MaterialAlternative materials[12];
          bool useCommon;
        	Material common[12];
        };

        void main() {
          outColor = texture(u_texture, v_texcoord);
        }
        """
    )
